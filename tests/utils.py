"""Utilities / Helpers for writing tests."""
import asyncio
from typing import Union

from termflame import Sample
from termflame import StackFrame


def make_sample(value: int, *frames: Union[str, int]) -> Sample:
    """Build a sample from frames listed outermost caller first.

    Strings become named frames and integers become address-only frames.
    """
    stack = tuple(
        StackFrame(address=frame)
        if isinstance(frame, int)
        else StackFrame(function=frame)
        for frame in reversed(frames)
    )
    return Sample(value=value, stack=stack)


def async_run(coro):
    return asyncio.run(coro)
