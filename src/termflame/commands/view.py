import argparse

from .common import add_profile_argument
from .common import load_reporter


class ViewCommand:
    """Explore a flame graph interactively in the terminal"""

    def prepare_parser(self, parser: argparse.ArgumentParser) -> None:
        add_profile_argument(parser)
        parser.add_argument(
            "--all-levels",
            help="Start by showing every level instead of a single one",
            action="store_true",
            default=False,
        )

    def run(self, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        reporter = load_reporter(args.profile)
        reporter.render(all_levels=args.all_levels)
