"""Errors raised while building or resolving references.

All of these fail the synthesis pass; none are meant to be caught and
worked around while defining stacks.
"""


class RefError(ValueError):
    """Base class for reference naming and resolution failures."""


class MalformedRefError(RefError):
    """Raised when a reference string does not have a recognised shape."""

    def __init__(self, value: str, reason: str = "invalid reference") -> None:
        self.value = value
        super().__init__(f"{reason}: {value}")


class MissingFieldError(RefError):
    """Raised when a Ref is rendered while a required field is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} required")


class RefNotFoundError(RefError, LookupError):
    """Raised when no registered reference matches a lookup key."""

    def __init__(self, key: str, available=()) -> None:
        self.key = key
        self.available = list(available)
        super().__init__(f"no constructs found for: {key}, available: {[str(ref) for ref in self.available]}")


class AmbiguousRefError(RefError, LookupError):
    """Raised when a lookup key matches more than one registered reference."""

    def __init__(self, key: str, candidates) -> None:
        self.key = key
        self.candidates = list(candidates)
        super().__init__(f"too many constructs found for: {key}, candidates: {[str(ref) for ref in self.candidates]}")
