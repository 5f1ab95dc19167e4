"""
Errors raised when a wire payload does not have the shape a transform expects.
Optional fields never raise; only required fields, unparseable timestamps and
values the internal model rejects do.
"""
from typing import Optional


class MalformedPayloadError(ValueError):
    """A required wire field is missing or holds a value of the wrong kind."""

    def __init__(self, shape: str, field: str, reason: Optional[str] = None):
        self.shape = shape
        self.field = field
        self.reason = reason or "missing required field"
        super().__init__(f"{shape}: {self.reason} {field!r}")
