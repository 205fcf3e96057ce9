from ._errors import ProfileParseError
from ._errors import TermflameError
from ._log import set_log_level
from ._reader import FoldedStackReader
from ._samples import Sample
from ._samples import StackFrame
from ._version import __version__

__all__ = [
    "FoldedStackReader",
    "ProfileParseError",
    "Sample",
    "StackFrame",
    "TermflameError",
    "__version__",
    "set_log_level",
]
