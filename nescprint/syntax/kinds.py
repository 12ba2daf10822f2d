""" The closed set of node kinds that can appear in a nesC syntax tree.

Each kind names a grammar construct. Keyword and operator kinds also carry
the spelling they have in source code, which is used as node text when a
node is created without explicit text.
"""

import enum


class NodeKind(enum.Enum):
    """ Tag identifying the grammar construct of a node """
    # Raw tokens, standing for themselves:
    ASYNC = 1
    AUTO = 2
    CALL = 3
    CHAR = 4
    COMMAND = 5
    CONST = 6
    DOUBLE = 7
    EXTERN = 8
    EVENT = 9
    FLOAT = 10
    INLINE = 11
    INT = 12
    LONG = 13
    NORACE = 14
    POST = 15
    REGISTER = 16
    RESTRICT = 17
    SHORT = 18
    SIGNAL = 19
    SIGNED = 20
    STATIC = 21
    TASK = 22
    TYPEDEF = 23
    UNSIGNED = 24
    VOID = 25
    VOLATILE = 26
    ELLIPSIS = 27
    RAW_IDENTIFIER = 28

    # Leaves:
    IDENTIFIER = 40
    CONSTANT = 41
    STRING_LITERAL = 42

    # Declarations and types:
    TYPE_NAME = 50
    DECLARATION = 51
    STRUCT = 52
    UNION = 53
    NX_STRUCT = 54
    NX_UNION = 55
    ENUM = 56
    ENUMERATOR = 57
    DECLARATOR_LIST = 58
    INIT_DECLARATOR = 59
    DECLARATOR = 60
    INITIALIZER_LIST = 61
    POINTER_QUALIFIER = 62
    DECLARATOR_ARRAY_MODIFIER = 63
    DECLARATOR_PARAMETER_LIST_MODIFIER = 64
    PARAMETER_LIST = 65
    PARAMETER = 66
    FUNCTION_DEFINITION = 67

    # Statements:
    STATEMENT = 80
    COMPOUND_STATEMENT = 81
    LABELED_STATEMENT = 82
    CASE = 83
    DEFAULT = 84
    ATOMIC = 85
    IF = 86
    SWITCH = 87
    WHILE = 88
    DO = 89
    FOR = 90
    FOR_INITIALIZE = 91
    FOR_CONDITION = 92
    FOR_ITERATION = 93
    GOTO = 94
    CONTINUE = 95
    BREAK = 96
    RETURN = 97

    # Binary operators:
    AMP = 110
    AND = 111
    ASSIGN = 112
    BITANDASSIGN = 113
    BITOR = 114
    BITORASSIGN = 115
    BITXOR = 116
    BITXORASSIGN = 117
    COMMA = 118
    DIVASSIGN = 119
    DIVIDE = 120
    EQUAL = 121
    GREATER = 122
    GREATEREQUAL = 123
    LESS = 124
    LESSEQUAL = 125
    LSHIFT = 126
    LSHIFTASSIGN = 127
    MINUS = 128
    MINUSASSIGN = 129
    MODULUS = 130
    MODASSIGN = 131
    MULTASSIGN = 132
    NOTEQUAL = 133
    OR = 134
    PLUS = 135
    PLUSASSIGN = 136
    RSHIFT = 137
    RSHIFTASSIGN = 138
    STAR = 139

    # Other expressions:
    CONDITIONAL = 150
    POSTFIX_EXPRESSION = 151
    BUILTIN_VA_ARG = 152
    ARGUMENT_LIST = 153
    ARRAY_ELEMENT_SELECTION = 154
    DOT = 155
    ARROW = 156
    PLUSPLUS = 157
    MINUSMINUS = 158
    PRE_INCREMENT = 159
    PRE_DECREMENT = 160
    ADDRESS_OF = 161
    UNARY_PLUS = 162
    UNARY_MINUS = 163
    SIZEOF_TYPE = 164
    SIZEOF_EXPRESSION = 165
    CAST = 166
    BITCOMPLEMENT = 167
    NOT = 168
    DEREFERENCE = 169

    # Large scale structure:
    FILE = 180
    LINE_DIRECTIVE = 181
    INTERFACE = 182
    COMPONENT_DEFINITION = 183
    COMPONENT_KIND = 184
    CONFIGURATION = 185
    MODULE = 186
    GENERIC = 187
    COMPONENT_PARAMETER_LIST = 188
    SPECIFICATION = 189
    USES = 190
    PROVIDES = 191
    INTERFACE_TYPE = 192
    IMPLEMENTATION = 193
    COMPONENTS = 194
    COMPONENT_DECLARATION = 195
    COMPONENT_INSTANTIATION = 196
    COMPONENT_ARGUMENTS = 197
    CONNECTION = 198
    LEFTARROW = 199
    IDENTIFIER_PATH = 200
    NULL = 201

    @property
    def spelling(self):
        """ The source text of this kind, or None for structural kinds """
        return SPELLINGS.get(self)

    @classmethod
    def from_name(cls, name):
        """ Lookup a kind by name, returning None when there is none """
        return cls.__members__.get(name)


RAW_TOKENS = frozenset([
    NodeKind.ASYNC, NodeKind.AUTO, NodeKind.CALL, NodeKind.CHAR,
    NodeKind.COMMAND, NodeKind.CONST, NodeKind.DOUBLE, NodeKind.EXTERN,
    NodeKind.EVENT, NodeKind.FLOAT, NodeKind.INLINE, NodeKind.INT,
    NodeKind.LONG, NodeKind.NORACE, NodeKind.POST, NodeKind.REGISTER,
    NodeKind.RESTRICT, NodeKind.SHORT, NodeKind.SIGNAL, NodeKind.SIGNED,
    NodeKind.STATIC, NodeKind.TASK, NodeKind.TYPEDEF, NodeKind.UNSIGNED,
    NodeKind.VOID, NodeKind.VOLATILE, NodeKind.ELLIPSIS,
])

STRUCTURE_TAGS = frozenset([
    NodeKind.STRUCT, NodeKind.UNION, NodeKind.NX_STRUCT, NodeKind.NX_UNION,
])

BINARY_OPERATORS = frozenset([
    NodeKind.AMP, NodeKind.AND, NodeKind.ASSIGN, NodeKind.BITANDASSIGN,
    NodeKind.BITOR, NodeKind.BITORASSIGN, NodeKind.BITXOR,
    NodeKind.BITXORASSIGN, NodeKind.COMMA, NodeKind.DIVASSIGN,
    NodeKind.DIVIDE, NodeKind.EQUAL, NodeKind.GREATER, NodeKind.GREATEREQUAL,
    NodeKind.LESS, NodeKind.LESSEQUAL, NodeKind.LSHIFT,
    NodeKind.LSHIFTASSIGN, NodeKind.MINUS, NodeKind.MINUSASSIGN,
    NodeKind.MODULUS, NodeKind.MODASSIGN, NodeKind.MULTASSIGN,
    NodeKind.NOTEQUAL, NodeKind.OR, NodeKind.PLUS, NodeKind.PLUSASSIGN,
    NodeKind.RSHIFT, NodeKind.RSHIFTASSIGN, NodeKind.STAR,
])

DECLARATION_KINDS = RAW_TOKENS | STRUCTURE_TAGS | frozenset([
    NodeKind.RAW_IDENTIFIER,
    NodeKind.TYPE_NAME,
    NodeKind.DECLARATION,
    NodeKind.ENUM,
    NodeKind.ENUMERATOR,
    NodeKind.DECLARATOR_LIST,
    NodeKind.INIT_DECLARATOR,
    NodeKind.DECLARATOR,
    NodeKind.INITIALIZER_LIST,
    NodeKind.POINTER_QUALIFIER,
    NodeKind.DECLARATOR_ARRAY_MODIFIER,
    NodeKind.DECLARATOR_PARAMETER_LIST_MODIFIER,
    NodeKind.PARAMETER_LIST,
    NodeKind.PARAMETER,
    NodeKind.FUNCTION_DEFINITION,
])

STATEMENT_KINDS = frozenset([
    NodeKind.STATEMENT,
    NodeKind.COMPOUND_STATEMENT,
    NodeKind.LABELED_STATEMENT,
    NodeKind.CASE,
    NodeKind.DEFAULT,
    NodeKind.ATOMIC,
    NodeKind.IF,
    NodeKind.SWITCH,
    NodeKind.WHILE,
    NodeKind.DO,
    NodeKind.FOR,
    NodeKind.FOR_INITIALIZE,
    NodeKind.FOR_CONDITION,
    NodeKind.FOR_ITERATION,
    NodeKind.GOTO,
    NodeKind.CONTINUE,
    NodeKind.BREAK,
    NodeKind.RETURN,
])

EXPRESSION_KINDS = BINARY_OPERATORS | frozenset([
    NodeKind.IDENTIFIER,
    NodeKind.CONSTANT,
    NodeKind.STRING_LITERAL,
    NodeKind.CONDITIONAL,
    NodeKind.POSTFIX_EXPRESSION,
    NodeKind.BUILTIN_VA_ARG,
    NodeKind.ARGUMENT_LIST,
    NodeKind.ARRAY_ELEMENT_SELECTION,
    NodeKind.DOT,
    NodeKind.ARROW,
    NodeKind.PLUSPLUS,
    NodeKind.MINUSMINUS,
    NodeKind.PRE_INCREMENT,
    NodeKind.PRE_DECREMENT,
    NodeKind.ADDRESS_OF,
    NodeKind.UNARY_PLUS,
    NodeKind.UNARY_MINUS,
    NodeKind.SIZEOF_TYPE,
    NodeKind.SIZEOF_EXPRESSION,
    NodeKind.CAST,
    NodeKind.BITCOMPLEMENT,
    NodeKind.NOT,
    NodeKind.DEREFERENCE,
])

# CONFIGURATION, MODULE, GENERIC and LEFTARROW are only inspected by their
# parents and have no rule of their own.
STRUCTURE_KINDS = frozenset([
    NodeKind.FILE,
    NodeKind.LINE_DIRECTIVE,
    NodeKind.INTERFACE,
    NodeKind.COMPONENT_DEFINITION,
    NodeKind.COMPONENT_KIND,
    NodeKind.COMPONENT_PARAMETER_LIST,
    NodeKind.SPECIFICATION,
    NodeKind.USES,
    NodeKind.PROVIDES,
    NodeKind.INTERFACE_TYPE,
    NodeKind.IMPLEMENTATION,
    NodeKind.COMPONENTS,
    NodeKind.COMPONENT_DECLARATION,
    NodeKind.COMPONENT_INSTANTIATION,
    NodeKind.COMPONENT_ARGUMENTS,
    NodeKind.CONNECTION,
    NodeKind.IDENTIFIER_PATH,
    NodeKind.NULL,
])


SPELLINGS = {
    NodeKind.ASYNC: 'async',
    NodeKind.AUTO: 'auto',
    NodeKind.CALL: 'call',
    NodeKind.CHAR: 'char',
    NodeKind.COMMAND: 'command',
    NodeKind.CONST: 'const',
    NodeKind.DOUBLE: 'double',
    NodeKind.EXTERN: 'extern',
    NodeKind.EVENT: 'event',
    NodeKind.FLOAT: 'float',
    NodeKind.INLINE: 'inline',
    NodeKind.INT: 'int',
    NodeKind.LONG: 'long',
    NodeKind.NORACE: 'norace',
    NodeKind.POST: 'post',
    NodeKind.REGISTER: 'register',
    NodeKind.RESTRICT: 'restrict',
    NodeKind.SHORT: 'short',
    NodeKind.SIGNAL: 'signal',
    NodeKind.SIGNED: 'signed',
    NodeKind.STATIC: 'static',
    NodeKind.TASK: 'task',
    NodeKind.TYPEDEF: 'typedef',
    NodeKind.UNSIGNED: 'unsigned',
    NodeKind.VOID: 'void',
    NodeKind.VOLATILE: 'volatile',
    NodeKind.ELLIPSIS: '...',
    NodeKind.STRUCT: 'struct',
    NodeKind.UNION: 'union',
    NodeKind.NX_STRUCT: 'nx_struct',
    NodeKind.NX_UNION: 'nx_union',
    NodeKind.ENUM: 'enum',
    NodeKind.AMP: '&',
    NodeKind.AND: '&&',
    NodeKind.ASSIGN: '=',
    NodeKind.BITANDASSIGN: '&=',
    NodeKind.BITOR: '|',
    NodeKind.BITORASSIGN: '|=',
    NodeKind.BITXOR: '^',
    NodeKind.BITXORASSIGN: '^=',
    NodeKind.COMMA: ',',
    NodeKind.DIVASSIGN: '/=',
    NodeKind.DIVIDE: '/',
    NodeKind.EQUAL: '==',
    NodeKind.GREATER: '>',
    NodeKind.GREATEREQUAL: '>=',
    NodeKind.LESS: '<',
    NodeKind.LESSEQUAL: '<=',
    NodeKind.LSHIFT: '<<',
    NodeKind.LSHIFTASSIGN: '<<=',
    NodeKind.MINUS: '-',
    NodeKind.MINUSASSIGN: '-=',
    NodeKind.MODULUS: '%',
    NodeKind.MODASSIGN: '%=',
    NodeKind.MULTASSIGN: '*=',
    NodeKind.NOTEQUAL: '!=',
    NodeKind.OR: '||',
    NodeKind.PLUS: '+',
    NodeKind.PLUSASSIGN: '+=',
    NodeKind.RSHIFT: '>>',
    NodeKind.RSHIFTASSIGN: '>>=',
    NodeKind.STAR: '*',
    NodeKind.DOT: '.',
    NodeKind.ARROW: '->',
    NodeKind.LEFTARROW: '<-',
    NodeKind.PLUSPLUS: '++',
    NodeKind.MINUSMINUS: '--',
    NodeKind.CONFIGURATION: 'configuration',
    NodeKind.MODULE: 'module',
    NodeKind.GENERIC: 'generic',
}
