from argparse import ArgumentParser


class PrintOptions:
    """ A collection of settings regarding the output of the printer """
    def __init__(self):
        self.settings = {}

        # Initialize defaults:
        self.disable('color')
        self.disable('html')
        self.disable('one_line')
        self.set('style', 'default')

    def enable(self, setting):
        self.settings[setting] = True

    def disable(self, setting):
        self.settings[setting] = False

    def set(self, setting, value):
        self.settings[setting] = value

    def __getitem__(self, index):
        return self.settings[index]

    @property
    def highlighted(self):
        """ Whether output passes through the syntax highlighter """
        return self['color'] or self['html']

    def process_args(self, args):
        """ Given a set of parsed arguments, apply those """
        self.set('color', args.color)
        self.set('html', args.html)
        self.set('style', args.style)

    @classmethod
    def from_args(cls, args):
        o = cls()
        o.process_args(args)
        return o


# Construct an argument parser for the various output options:
printoptions_parser = ArgumentParser(add_help=False)
printoptions_parser.add_argument(
    '--color', action='store_true', default=False,
    help="Highlight the output with terminal colors")
printoptions_parser.add_argument(
    '--html', action='store_true', default=False,
    help="Output a highlighted html page")
printoptions_parser.add_argument(
    '--style', default='default', metavar='style',
    help="The pygments style used for highlighting")
