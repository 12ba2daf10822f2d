""" Render nesC syntax trees as source code.

Each tree file holds one or more trees in tree notation, for example:

    (FILE (DECLARATION INT (DECLARATOR_LIST (DECLARATOR x))))

Every tree is rendered in turn to the output.
"""

import argparse
from .base import base_parser, out_parser, LogSetup, load_trees
from ..options import printoptions_parser, PrintOptions
from .. import api


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, out_parser, printoptions_parser],
)
parser.add_argument(
    "sources", metavar="tree-file", nargs="+", help="file with syntax trees")


def render(args=None):
    """ Render trees from the given files """
    args = parser.parse_args(args)
    with LogSetup(args):
        options = PrintOptions.from_args(args)
        for filename in args.sources:
            for tree in load_trees(filename):
                api.render(tree, output=args.output, options=options)
        args.output.flush()


if __name__ == "__main__":
    render()
