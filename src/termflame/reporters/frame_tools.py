"""Tools for naming stack frames."""
import functools

from termflame._samples import StackFrame


@functools.lru_cache(maxsize=1000)
def address_label(address: int) -> str:
    return f"0x{address:x}"


def frame_name(frame: StackFrame) -> str:
    """Return the display name of a frame.

    Frames without a symbol name are labelled with their address, so that
    unresolved frames sharing an address still merge into one node.
    """
    if frame.function:
        return frame.function
    return address_label(frame.address)
