""" nesC syntax trees: node kinds, nodes, tree notation and dumps. """

from .kinds import NodeKind
from .nodes import Node, identifier, constant
from .reader import TreeReader, read_tree, read_trees, read_tree_file
from .dump import TreePrinter, dump_tree, print_tree


__all__ = [
    'NodeKind', 'Node', 'identifier', 'constant',
    'TreeReader', 'read_tree', 'read_trees', 'read_tree_file',
    'TreePrinter', 'dump_tree', 'print_tree',
]
