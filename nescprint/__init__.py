""" Render nesC syntax trees back into readable source code.

Example usage:

>>> from nescprint.syntax import read_tree
>>> from nescprint.printer import render_text
>>> render_text(read_tree('(STATEMENT (ASSIGN x 1))'))
'x = 1;\\n\\n'

"""

import sys

# Define version here. Used in the setup script and the command line:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))


# Assert python version:
assert sys.version_info.major == 3, "Needs to be run in python version 3.x"
