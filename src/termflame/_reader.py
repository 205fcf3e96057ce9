"""Reader for profiles in the folded stack format.

Each line holds one stack, outermost frame first, frames separated by
semicolons, followed by a space and the sample value::

    main;parse;tokenize 120
    main;0x7f3a2c41 15
"""
import logging
import os
import re
from typing import IO
from typing import Iterator
from typing import Tuple
from typing import Union

from termflame._errors import ProfileParseError
from termflame._samples import Sample
from termflame._samples import StackFrame

LOGGER = logging.getLogger(__name__)

RE_ADDRESS = re.compile(r"0x[0-9a-fA-F]+")


def parse_frame(token: str) -> StackFrame:
    if RE_ADDRESS.fullmatch(token):
        return StackFrame(address=int(token, 16))
    return StackFrame(function=token)


def parse_folded_line(line: str, lineno: int = 0) -> Sample:
    stack, _, count = line.rpartition(" ")
    try:
        value = int(count)
    except ValueError:
        raise ProfileParseError("invalid sample value", lineno=lineno, line=line)
    if value < 0:
        raise ProfileParseError("negative sample value", lineno=lineno, line=line)

    stack = stack.strip()
    frames: Tuple[StackFrame, ...] = ()
    if stack:
        tokens = stack.split(";")
        if any(not token for token in tokens):
            raise ProfileParseError("empty frame", lineno=lineno, line=line)
        frames = tuple(parse_frame(token) for token in reversed(tokens))
    return Sample(value=value, stack=frames)


def read_folded(stream: IO[str]) -> Iterator[Sample]:
    for lineno, raw_line in enumerate(stream, 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            LOGGER.debug("Skipping line %d", lineno)
            continue
        yield parse_folded_line(line, lineno)


class FoldedStackReader:
    """Reads samples from a folded stack file."""

    def __init__(self, file_name: Union[str, "os.PathLike[str]"]) -> None:
        self.file_name = os.fspath(file_name)

    def samples(self) -> Iterator[Sample]:
        with open(self.file_name, encoding="utf-8") as stream:
            yield from read_folded(stream)
