"""Partition module.

Builds slash delimited paths, like object store prefixes, from plain and
named (key=value) segments:

    Partition.named_of("case", "lower").with_named("language", "english").partition()
    # "case=lower/language=english"

A None value is skipped. A None value given to one of the *_terminal methods
ends the partition, and every later segment is ignored.
"""
from enum import Enum
from typing import Optional, Tuple

from naming.label import Label

# (text, literal); literal segments are appended without a slash
Segment = Tuple[str, bool]


class Partition:
    """Immutable path built from segments."""

    __slots__ = ("_segments", "_terminated")

    def __init__(self, segments: Tuple[Segment, ...] = (), terminated: bool = False) -> None:
        self._segments = tuple(segments)
        self._terminated = terminated

    @staticmethod
    def of(value) -> "Partition":
        if value is None:
            return NULL_PARTITION

        if isinstance(value, Partition):
            return value

        if isinstance(value, Enum):
            return Partition.named_of(type(value).__name__, _enum_value(value))

        if isinstance(value, Label):
            value = value.lower_hyphen_path()
            if value is None:
                return NULL_PARTITION

        value = str(value).strip("/")

        if not value:
            return NULL_PARTITION

        return Partition(((value, False),))

    @staticmethod
    def named_of(key: str, value) -> "Partition":
        if value is None:
            return NULL_PARTITION

        if isinstance(value, Label):
            value = value.lower_hyphen()
        elif isinstance(value, Enum):
            value = _enum_value(value)

        return Partition(((f"{Label.of(key).lower_hyphen()}={value}", False),))

    @staticmethod
    def literal(value: Optional[str]) -> "Partition":
        """Return a Partition used as given, appended without a slash."""
        if value is None:
            return NULL_PARTITION

        return Partition(((value, True),))

    def is_null(self) -> bool:
        return not self._segments

    def is_terminated(self) -> bool:
        return self._terminated

    def with_(self, value) -> "Partition":
        if self._terminated or value is None:
            return self

        other = Partition.of(value)

        if other.is_null():
            return self._terminate() if other._terminated else self

        return Partition(self._segments + other._segments, other._terminated)

    def having(self, *values) -> "Partition":
        result = self
        for value in values:
            result = result.with_(value)
        return result

    def with_named(self, key: str, value) -> "Partition":
        if value is None:
            return self

        return self.with_(Partition.named_of(key, value))

    def with_terminal(self, value) -> "Partition":
        if value is None:
            return self._terminate()

        return self.with_(value)

    def with_named_terminal(self, key: str, value) -> "Partition":
        if value is None:
            return self._terminate()

        return self.with_named(key, value)

    def partition(self, trailing_slash: bool = False) -> Optional[str]:
        if self.is_null():
            return None

        text = self._segments[0][0]
        for segment, literal in self._segments[1:]:
            text += segment if literal else "/" + segment

        return text + "/" if trailing_slash else text

    def path(self) -> str:
        if self.is_null():
            return "/"

        return "/" + self.partition(True)

    def _terminate(self) -> "Partition":
        return Partition(self._segments, True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._segments == other._segments and self._terminated == other._terminated

    def __hash__(self) -> int:
        return hash((self._segments, self._terminated))

    def __str__(self) -> str:
        return str(self.partition())


def _enum_value(member: Enum) -> str:
    value = member.value if isinstance(member.value, str) else member.name
    return Label.of(value).lower_hyphen()


NULL_PARTITION = Partition()
