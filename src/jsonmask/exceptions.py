"""Error taxonomy for jsonmask."""

from __future__ import annotations

from typing import Mapping


class JsonMaskError(Exception):
    """Base class for every expected, user-facing jsonmask failure."""


class InputAccessError(JsonMaskError):
    """A named input could not be opened or read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot read {source}: {reason}")
        self.source = source
        self.reason = reason


class DocumentParseError(JsonMaskError):
    """Input text is not valid JSON (or not a valid JSON value stream)."""

    def __init__(self, source: str, reason: str, *, line: int = 0, column: int = 0):
        location = f"{source}:{line}:{column}" if line else source
        super().__init__(f"invalid JSON in {location}: {reason}")
        self.source = source
        self.reason = reason
        self.line = line
        self.column = column


class StdinUsageError(JsonMaskError):
    """`-` was combined with other input sources."""


class ConfigError(JsonMaskError):
    """An explicitly requested configuration file is unusable."""


class NeverRaise(RuntimeError):
    """Sentinel exception for internal faults that must be unreachable.

    Raising this exception means an invariant of the transform was broken, for
    example a generated number that does not fit its sub-kind. There is no
    recovery path; callers are expected to let it propagate.
    """

    def __init__(self, message: str, *, env: Mapping[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env = dict(env or {})


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""
