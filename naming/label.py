"""Label module.

A Label simplifies creating the strings used for resource names, export keys,
display values and paths. A Label is immutable and renders itself in several
case formats:

    Label.of("foo").with_("bar").with_("baz").camel_case()         # "FooBarBaz"
    Label.of("foo").with_("bar").with_("baz").lower_hyphen()       # "foo-bar-baz"
    Label.of("foo").with_("barBar").with_("baz").lower_hyphen_path()  # "foo/bar-bar/baz"

Three kinds of Label exist:
- simple: parsed from a raw string, rendered per format from its words
- fixed: a verbatim value that is never reformatted (see naming.fixed)
- composite: an ordered chain of labels, rendered per format by joining the
  rendering of each part, so word boundaries survive composition
"""
from enum import Enum
from typing import Optional, Tuple

SIMPLE = "simple"
FIXED = "fixed"
COMPOSITE = "composite"

# joiner used by each format when rendering a composite label
_SEPARATORS = {
    "camel_case": "",
    "lower_colon_path": ":",
    "lower_hyphen": "-",
    "lower_hyphen_path": "/",
    "lower_underscore": "_",
    "upper_underscore": "_",
}


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _split_camel(value: str) -> Tuple[str, ...]:
    """Split a camel case string before each upper case character."""
    words = [""]
    for char in value:
        if char.isupper() and words[-1]:
            words.append(char)
        else:
            words[-1] += char
    return tuple(words)


class Label:
    """Immutable, composable naming value.

    Use Label.of() or Label.fixed() to create instances, never the constructor.
    """

    __slots__ = ("_kind", "_words", "_value", "_parts", "_abbr")

    NULL: "Label"

    def __init__(self, kind: str, *, words: Tuple[str, ...] = (), value: Optional[str] = None,
                 parts: Tuple["Label", ...] = (), abbr: Optional["Label"] = None) -> None:
        self._kind = kind
        self._words = tuple(words)
        self._value = value
        self._parts = tuple(parts)
        self._abbr = abbr if abbr is not None and not abbr.is_null() else None

    @staticmethod
    def of(value, abbr=None) -> "Label":
        """Convert the given value to a Label.

        Strings containing a hyphen are read as lower hyphen, strings containing
        an underscore as lower underscore, anything else as camel case.

        Args:
            value: a string, Label, Enum member or any object with a useful str().
            abbr: optional abbreviated form of the value.

        Returns:
            A Label, Label.NULL if value is None.
        """
        if value is None:
            return Label.NULL

        if isinstance(value, Label):
            label = value
        elif isinstance(value, Enum):
            label = Label.of(value.value)
        elif isinstance(value, str):
            if "-" in value:
                label = Label.from_lower_hyphen(value)
            elif "_" in value:
                label = Label.from_lower_underscore(value)
            else:
                label = Label(SIMPLE, words=_split_camel(value))
        else:
            label = Label.of(str(value))

        if abbr is None:
            return label

        abbr = Label.of(abbr)
        if abbr.is_null():
            return label

        return label.abbreviated(abbr)

    @staticmethod
    def from_lower_hyphen(value: str) -> "Label":
        return Label(SIMPLE, words=tuple(value.split("-")))

    @staticmethod
    def from_lower_underscore(value: str) -> "Label":
        return Label(SIMPLE, words=tuple(value.split("_")))

    @staticmethod
    def fixed(value: Optional[str]) -> "Label":
        """Return a Label rendered verbatim in every format."""
        from naming.fixed import Fixed

        return Fixed.of(value)

    @staticmethod
    def concat(*labels) -> "Label":
        result = Label.NULL
        for label in labels:
            result = result.with_(label)
        return result

    @staticmethod
    def require_non_empty(label: Optional["Label"], message: str = "label may not be empty") -> None:
        if label is None or label.is_null():
            raise ValueError(message)

    @staticmethod
    def name_or_null(label: Optional["Label"]) -> Optional[str]:
        return None if label is None else label.camel_case()

    @property
    def kind(self) -> str:
        return self._kind

    def is_null(self) -> bool:
        return self.camel_case() is None

    def with_(self, other) -> "Label":
        """Return a Label concatenating this Label and the given value.

        None and null Labels are ignored, and a null Label composed with a value
        returns that value, so Label.NULL is an identity on either side.
        """
        if other is None:
            return self

        other = Label.of(other)

        if other.is_null():
            return self

        if self.is_null():
            return other

        return Label(COMPOSITE, parts=self._chain() + other._chain())

    def having(self, *values) -> "Label":
        result = self
        for value in values:
            result = result.with_(value)
        return result

    def this_if_null(self, label: Optional["Label"]) -> "Label":
        """Return the given Label unless it is null, otherwise this Label."""
        if label is None or label.is_null():
            return self

        return label

    def abbreviated(self, abbr=None) -> "Label":
        """With an argument, return a copy carrying the abbreviation.

        Without, return the abbreviated form, or this Label if none was given.
        """
        if abbr is None:
            return self._abbr if self._abbr is not None else self

        return self._copy(abbr=Label.of(abbr))

    def upper_only(self) -> "Label":
        from naming.fixed import Fixed

        camel = self.camel_case()
        return Fixed.of(camel.upper() if camel is not None else None)

    def camel_case(self) -> Optional[str]:
        return self._render("camel_case")

    def lower_camel_case(self) -> Optional[str]:
        if self._kind == FIXED:
            return self._value

        if self._kind == COMPOSITE:
            head, *tail = self._parts
            return head.lower_camel_case() + "".join(part.camel_case() for part in tail)

        camel = self.camel_case()
        return camel[:1].lower() + camel[1:]

    def lower_colon_path(self) -> Optional[str]:
        return self._render("lower_colon_path")

    def lower_hyphen(self) -> Optional[str]:
        return self._render("lower_hyphen")

    def lower_hyphen_path(self, trailing_slash: bool = False) -> Optional[str]:
        path = self._render("lower_hyphen_path")
        return path + "/" if trailing_slash and path is not None else path

    def lower_underscore(self) -> Optional[str]:
        return self._render("lower_underscore")

    def upper_underscore(self) -> Optional[str]:
        return self._render("upper_underscore")

    def short_camel_case(self) -> Optional[str]:
        return self._render_short("camel_case")

    def short_lower_hyphen(self) -> Optional[str]:
        return self._render_short("lower_hyphen")

    def short_lower_underscore(self) -> Optional[str]:
        return self._render_short("lower_underscore")

    def _render(self, fmt: str) -> Optional[str]:
        if self._kind == FIXED:
            return self._value

        if self._kind == COMPOSITE:
            return _SEPARATORS[fmt].join(part._render(fmt) for part in self._parts)

        if fmt == "camel_case":
            return "".join(_capitalize(word) for word in self._words)

        if fmt == "upper_underscore":
            return "_".join(word.upper() for word in self._words)

        # colon and slash paths of a single label are plain lower hyphen
        separator = "_" if fmt == "lower_underscore" else "-"
        return separator.join(word.lower() for word in self._words)

    def _render_short(self, fmt: str) -> Optional[str]:
        if self._abbr is not None:
            return self._abbr._render(fmt)

        if self._kind == COMPOSITE:
            return _SEPARATORS[fmt].join(part._render_short(fmt) for part in self._parts)

        return self._render(fmt)

    def _chain(self) -> Tuple["Label", ...]:
        # an abbreviated composite keeps its abbreviation by staying one part
        if self._kind == COMPOSITE and self._abbr is None:
            return self._parts
        return (self,)

    def _copy(self, **changes) -> "Label":
        copy = object.__new__(type(self))
        Label.__init__(
            copy,
            changes.get("kind", self._kind),
            words=changes.get("words", self._words),
            value=changes.get("value", self._value),
            parts=changes.get("parts", self._parts),
            abbr=changes.get("abbr", self._abbr),
        )
        return copy

    def _key(self):
        return self._kind, self._words, self._value, self._parts, self._abbr

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())

    def __lt__(self, other: "Label") -> bool:
        return (self.camel_case() or "") < (other.camel_case() or "")

    def __str__(self) -> str:
        return str(self.camel_case())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.camel_case()!r})"


Label.NULL = Label(FIXED, value=None)
