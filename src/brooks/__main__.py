"""
Vertex coloring of connected graphs within the bound of Brooks' theorem
"""
import sys
import logging
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from .cli import CommandLineError, setup_logging
from .cli import color, verify

from . import __version__

logger = logging.getLogger(__name__)

SUBCOMMANDS = {
    "color": color,
    "verify": verify,
}


class HelpfulArgumentParser(ArgumentParser):
    """Print the full help when the command line cannot be parsed"""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("formatter_class", RawDescriptionHelpFormatter)
        super().__init__(*args, **kwargs)

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = HelpfulArgumentParser(description=__doc__, prog="brooks")
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "--debug",
        default=False,
        action="store_true",
        help="Print some extra debugging messages",
    )
    subparsers = parser.add_subparsers(metavar="SUBCOMMAND")
    for name, module in SUBCOMMANDS.items():
        summary = module.__doc__.strip().split("\n", maxsplit=1)[0]
        subparser = subparsers.add_parser(
            name,
            help=summary.replace("%", "%%"),
            description=module.__doc__,
            formatter_class=RawDescriptionHelpFormatter,
        )
        module.add_arguments(subparser)
        subparser.set_defaults(module=module)
    return parser


def main(arguments=None):
    parser = build_parser()
    args = parser.parse_args(arguments)
    module = getattr(args, "module", None)
    if module is None:
        parser.error("Please provide the name of a subcommand to run")
    setup_logging(args.debug)

    del args.debug
    del args.module
    try:
        module.main(args)
    except CommandLineError as e:
        logger.error("brooks error: %s", str(e))
        logger.debug("Command line error. Traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
