import argparse
import logging
import sys
import textwrap
from typing import List
from typing import Optional

from termflame._errors import TermflameCommandError
from termflame._errors import TermflameError
from termflame._log import set_log_level
from termflame._version import __version__

from . import static
from . import view
from .protocol import Command

_COMMANDS: List[Command] = [
    view.ViewCommand(),
    static.PrintCommand(),
]

_EXAMPLES = [
    "$ termflame view profile.folded",
    "$ termflame print --all-levels --width 120 profile.folded",
]

_DESCRIPTION = """\
Flame graphs for sampled call stacks, in the terminal

Feed `termflame` a profile in folded stack format, then navigate it
level by level with the arrow keys.

    Example:

    """ + """
    """.join(
    _EXAMPLES
)


def get_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=_DESCRIPTION,
        prog="termflame",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity. Option is additive and can be specified up to 3 times",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
        help="Displays the current version of termflame",
    )

    subparsers = parser.add_subparsers(
        help="Mode of operation",
        dest="command",
        required=True,
    )

    for command in _COMMANDS:
        # Extract the CLI command name from the classes' names
        assert command.__class__.__name__.endswith("Command")
        name = command.__class__.__name__[: -len("Command")].lower()

        command_parser = subparsers.add_parser(
            name,
            help=command.__doc__,
            description=textwrap.dedent(command.__doc__ or ""),
        )
        command_parser.set_defaults(entrypoint=command.run)
        command.prepare_parser(command_parser)

    return parser


def determine_logging_level_from_verbosity(
    verbose_level: int,
) -> int:
    if verbose_level == 0:
        return logging.WARNING
    elif verbose_level == 1:
        return logging.INFO
    else:
        return logging.DEBUG


def main(args: Optional[List[str]] = None) -> int:
    if args is None:
        args = sys.argv[1:]

    parser = get_argument_parser()
    arg_values = parser.parse_args(args=args)
    set_log_level(determine_logging_level_from_verbosity(arg_values.verbose))

    try:
        arg_values.entrypoint(arg_values, parser)
    except TermflameCommandError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except TermflameError as e:
        print(e, file=sys.stderr)
        return 1
    else:
        return 0
