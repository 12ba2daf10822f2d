""" Dump nesC syntax trees for debugging.

By default every node is printed on its own line, indented by depth.
"""

import argparse
from .base import base_parser, out_parser, LogSetup, load_trees
from ..options import PrintOptions
from .. import api


parser = argparse.ArgumentParser(
    description=__doc__, parents=[base_parser, out_parser])
parser.add_argument(
    "sources", metavar="tree-file", nargs="+", help="file with syntax trees")
parser.add_argument(
    "--one-line", action="store_true", default=False,
    help="Dump each tree on a single line in tree notation")


def dump(args=None):
    """ Dump trees from the given files """
    args = parser.parse_args(args)
    with LogSetup(args):
        options = PrintOptions()
        options.set('one_line', args.one_line)
        for filename in args.sources:
            for tree in load_trees(filename):
                api.dump(tree, output=args.output, options=options)
        args.output.flush()


if __name__ == "__main__":
    dump()
