from dataclasses import dataclass
from dataclasses import field
from typing import Optional
from typing import Tuple


@dataclass(frozen=True)
class StackFrame:
    """One entry of a sampled call stack."""

    address: int = 0
    function: Optional[str] = None


@dataclass(frozen=True)
class Sample:
    """A weighted observation of a call stack.

    ``stack`` is ordered leaf first: ``stack[0]`` is the innermost frame and
    ``stack[-1]`` the outermost caller.
    """

    value: int
    stack: Tuple[StackFrame, ...] = field(default_factory=tuple)
