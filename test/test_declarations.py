import unittest

from nescprint.printer import render_text
from nescprint.syntax import read_tree


def render(text):
    return render_text(read_tree(text))


class DeclarationTestCase(unittest.TestCase):
    """ Check the rendering of declarations and types """
    def test_simple(self):
        src = '(DECLARATION INT (DECLARATOR_LIST (DECLARATOR x)))'
        self.assertEqual('int x ;\n\n', render(src))

    def test_multiple_declarators(self):
        src = """
        (DECLARATION UNSIGNED LONG
            (DECLARATOR_LIST (DECLARATOR a) (DECLARATOR b)))
        """
        self.assertEqual('unsigned long a , b ;\n\n', render(src))

    def test_typedef_name(self):
        """ Typedef names get an extra space, to keep them apart """
        src = """
        (DECLARATION (RAW_IDENTIFIER "uint8_t")
            (DECLARATOR_LIST (INIT_DECLARATOR (DECLARATOR x) 5)))
        """
        self.assertEqual('uint8_t  x  = 5;\n\n', render(src))

    def test_initializer_expression(self):
        src = """
        (DECLARATION INT
            (DECLARATOR_LIST (INIT_DECLARATOR (DECLARATOR x) (PLUS a 1))))
        """
        self.assertEqual('int x  = ( a + 1 );\n\n', render(src))

    def test_initializer_list(self):
        src = """
        (DECLARATION INT (DECLARATOR_LIST (INIT_DECLARATOR
            (DECLARATOR a (DECLARATOR_ARRAY_MODIFIER))
            (INITIALIZER_LIST 1 2))))
        """
        self.assertEqual('int a []  = { 1, 2 };\n\n', render(src))

    def test_array_size(self):
        src = """
        (DECLARATION CHAR (DECLARATOR_LIST
            (DECLARATOR buf (DECLARATOR_ARRAY_MODIFIER 16))))
        """
        self.assertEqual('char buf [16] ;\n\n', render(src))

    def test_pointer(self):
        src = """
        (DECLARATION CHAR (DECLARATOR_LIST
            (DECLARATOR (POINTER_QUALIFIER CONST) p)))
        """
        self.assertEqual('char *const  p ;\n\n', render(src))

    def test_function_pointer(self):
        """ int (*p)(int x); """
        src = """
        (DECLARATION INT (DECLARATOR_LIST
            (DECLARATOR
                (DECLARATOR POINTER_QUALIFIER p)
                (DECLARATOR_PARAMETER_LIST_MODIFIER
                    (PARAMETER_LIST (PARAMETER INT (DECLARATOR x)))))))
        """
        text = render(src)
        self.assertEqual('int (* p ) ( int x  ) ;\n\n', text)
        self.assertIn('(* p )', text)
        self.assertNotIn('(x', text)

    def test_deep_nesting(self):
        """ Every nested declarator level is parenthesized """
        src = """
        (DECLARATION INT (DECLARATOR_LIST
            (DECLARATOR (DECLARATOR (DECLARATOR x)))))
        """
        self.assertEqual('int ((x ) ) ;\n\n', render(src))

    def test_function_definition(self):
        src = """
        (DECLARATION (FUNCTION_DEFINITION VOID
            (DECLARATOR f (DECLARATOR_PARAMETER_LIST_MODIFIER
                (PARAMETER_LIST (PARAMETER VOID))))
            (COMPOUND_STATEMENT (RETURN))))
        """
        self.assertEqual(
            'void f ( void  ) \n{\n    return ;\n}\n\n\n', render(src))

    def test_parameters(self):
        src = """
        (DECLARATION (FUNCTION_DEFINITION COMMAND (RAW_IDENTIFIER "error_t")
            (DECLARATOR send (DECLARATOR_PARAMETER_LIST_MODIFIER
                (PARAMETER_LIST
                    (PARAMETER (RAW_IDENTIFIER "uint8_t") (DECLARATOR len))
                    (PARAMETER CHAR (DECLARATOR POINTER_QUALIFIER buf))
                    (PARAMETER ELLIPSIS))))
            COMPOUND_STATEMENT))
        """
        self.assertEqual(
            'command error_t send '
            '( uint8_t  len , char * buf , ...  ) \n{\n}\n\n\n',
            render(src))

    def test_semicolon_only_without_function(self):
        declaration = render(
            '(DECLARATION INT (DECLARATOR_LIST (DECLARATOR x)))')
        definition = render("""
            (DECLARATION (FUNCTION_DEFINITION INT (DECLARATOR f)
                COMPOUND_STATEMENT))
            """)
        self.assertTrue(declaration.rstrip().endswith(';'))
        self.assertFalse(definition.rstrip().endswith(';'))

    def test_struct(self):
        src = """
        (DECLARATION
            (STRUCT point
                (DECLARATION INT (DECLARATOR_LIST (DECLARATOR x)))
                (DECLARATION INT (DECLARATOR_LIST (DECLARATOR y))))
            (DECLARATOR_LIST (DECLARATOR p)))
        """
        self.assertEqual(
            'struct point {\n    int x ;\n    int y ;\n} p ;\n\n',
            render(src))

    def test_struct_reference(self):
        src = """
        (DECLARATION (NX_STRUCT msg) (DECLARATOR_LIST (DECLARATOR m)))
        """
        self.assertEqual('nx_struct msg m ;\n\n', render(src))

    def test_anonymous_union(self):
        src = """
        (DECLARATION
            (UNION (DECLARATION INT (DECLARATOR_LIST (DECLARATOR i)))))
        """
        self.assertEqual('union {\n    int i ;\n} ;\n\n', render(src))

    def test_enum(self):
        src = """
        (DECLARATION (ENUM color (ENUMERATOR RED) (ENUMERATOR GREEN 2)))
        """
        self.assertEqual('enum color { RED, GREEN = 2} ;\n\n', render(src))

    def test_indented_declaration(self):
        src = """
        (COMPOUND_STATEMENT
            (DECLARATION INT (DECLARATOR_LIST (DECLARATOR x))))
        """
        self.assertEqual('{\n    int x ;\n}\n\n', render(src))


if __name__ == '__main__':
    unittest.main()
