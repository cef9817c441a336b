"""Fixed labels.

Values that must never be reformatted, like account ids, regions, stages and
versions. Every rendering of a Fixed label returns the value as given.
"""
from typing import Optional

from naming.label import FIXED, Label


class Fixed(Label):
    """A Label whose value is used verbatim in every format."""

    __slots__ = ()

    def __init__(self, value: Optional[str]) -> None:
        super().__init__(FIXED, value=value)

    @classmethod
    def of(cls, value: Optional[str]) -> "Fixed":
        if isinstance(value, Label):
            value = value.camel_case()
        return cls(value)

    @classmethod
    def fixed_null(cls) -> "Fixed":
        return _FIXED_NULL

    @property
    def value(self) -> Optional[str]:
        return self._value


class Stage(Fixed):
    """Deployment stage, like dev or prod."""

    __slots__ = ()

    @classmethod
    def null_stage(cls) -> "Stage":
        return _NULL_STAGE

    def as_lower(self) -> "Stage":
        if self._value is None:
            return self
        return Stage(self._value.lower())


class Version(Fixed):
    """Version token of a deployed scope."""

    __slots__ = ()

    @classmethod
    def of(cls, value: Optional[str]) -> "Version":
        if value is None:
            raise ValueError("version may not be null")
        return super().of(value)

    @classmethod
    def version_null(cls) -> "Version":
        return _NULL_VERSION


class Region(Fixed):
    """Cloud region, like us-east-1."""

    __slots__ = ()


_FIXED_NULL = Fixed(None)
_NULL_STAGE = Stage(None)
_NULL_VERSION = Version(None)
