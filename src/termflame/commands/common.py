import argparse
import logging
from pathlib import Path

from termflame import FoldedStackReader
from termflame._errors import ProfileParseError
from termflame._errors import TermflameCommandError
from termflame.reporters import FlameGraphReporter

LOGGER = logging.getLogger(__name__)


def add_profile_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "profile",
        help="Profile in folded stack format (one 'a;b;c <value>' line per stack)",
    )


def load_reporter(profile: str) -> FlameGraphReporter:
    profile_path = Path(profile)
    if not profile_path.exists() or not profile_path.is_file():
        raise TermflameCommandError(f"No such file: {profile}", exit_code=1)

    LOGGER.info("Reading samples from %s", profile_path)
    try:
        reader = FoldedStackReader(profile_path)
        return FlameGraphReporter.from_samples(reader.samples())
    except (OSError, UnicodeDecodeError, ProfileParseError) as e:
        raise TermflameCommandError(
            f"Failed to parse samples in {profile_path}\nReason: {e}",
            exit_code=1,
        )
