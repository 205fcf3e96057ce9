import argparse

from .common import add_profile_argument
from .common import load_reporter


class PrintCommand:
    """Print a flame graph to standard output"""

    def prepare_parser(self, parser: argparse.ArgumentParser) -> None:
        add_profile_argument(parser)
        parser.add_argument(
            "-w",
            "--width",
            help="Number of columns to use (defaults to the terminal width)",
            type=int,
            default=None,
        )
        parser.add_argument(
            "-c",
            "--column",
            help="Column of the node to highlight and describe (defaults to 0)",
            type=int,
            default=0,
        )
        level_group = parser.add_mutually_exclusive_group()
        level_group.add_argument(
            "-l",
            "--level",
            help="Level to print (defaults to 1, the callers below the root)",
            type=int,
            default=1,
        )
        level_group.add_argument(
            "--all-levels",
            help="Print every level below the root, one per line",
            action="store_true",
            default=False,
        )

    def run(self, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        if args.width is not None and args.width < 1:
            parser.error("--width must be a positive number of columns")
        reporter = load_reporter(args.profile)
        reporter.render_static(
            width=args.width,
            level=args.level,
            column=args.column,
            all_levels=args.all_levels,
        )
