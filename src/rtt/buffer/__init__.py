"""Line buffer, cursor state and plain-text persistence."""

from .buffer import NEWLINE, Buffer, Transaction
from .document import DocumentError, read_lines, write_lines
from .line import Line, expand_tabs
from .state import Motion, Position, ViewState
from .validation import clamp_position, line_length

__all__ = [
    "Buffer",
    "Transaction",
    "NEWLINE",
    "DocumentError",
    "read_lines",
    "write_lines",
    "Line",
    "expand_tabs",
    "Motion",
    "Position",
    "ViewState",
    "clamp_position",
    "line_length",
]
