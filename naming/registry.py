"""Registry of exported references and their local construct handles.

A partial key names a registered Ref with as few segments as needed:

    [provider:]resource-ns:resource-type:resource-name

Segments are anchored on the right, so a single segment is always the
resource name. Resolution narrows the candidates one field at a time, and only
uses a further field when the previous one left more than one candidate.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Generic, Iterable, List, Mapping, Optional, Tuple, TypeVar

from naming.errors import AmbiguousRefError, MalformedRefError, RefNotFoundError
from naming.label import Label
from naming.ref import Ref

LOG = logging.getLogger(__name__)

T = TypeVar("T")

MAX_SEGMENTS = 4


@dataclass(frozen=True)
class PartialRef:
    """A parsed partial lookup key, absent segments are None."""

    key: str
    resource_name: str
    resource_type: Optional[str] = None
    resource_ns: Optional[str] = None
    provider: Optional[str] = None


def parse_partial_ref(key: str) -> PartialRef:
    if key is None:
        raise ValueError("relative type ref may not be null")

    segments = key.split(":")

    if len(segments) > MAX_SEGMENTS:
        raise MalformedRefError(key, "invalid local ref")

    segments.reverse()
    segments += [None] * (MAX_SEGMENTS - len(segments))
    resource_name, resource_type, resource_ns, provider = segments

    return PartialRef(key=key, resource_name=resource_name, resource_type=resource_type,
                      resource_ns=resource_ns, provider=provider)


def _canonical(value) -> str:
    return (Label.of(value).camel_case() or "").lower()


def _matching(candidates: List[Tuple[Ref, T]], field: str, value: str) -> List[Tuple[Ref, T]]:
    wanted = _canonical(value)
    return [(ref, handle) for ref, handle in candidates if _canonical(getattr(ref, field).value) == wanted]


def resolve_ref(candidates: Mapping[Ref, T], key: str) -> Tuple[Ref, T]:
    """Resolve a partial key against the given candidates.

    Matching is on the resource name first, then on the resource type,
    namespace and provider, each only when supplied in the key and only while
    more than one candidate remains.

    Args:
        candidates: the registered refs and their handles.
        key: a partial key of one to four colon delimited segments.

    Returns:
        The single matching (Ref, handle) pair.

    Raises:
        MalformedRefError: if the key has more than four segments.
        RefNotFoundError: if no candidate matches.
        AmbiguousRefError: if more than one candidate matches every supplied segment.
    """
    partial = parse_partial_ref(key)
    available = list(candidates.keys())
    remaining = list(candidates.items())

    narrowing = (
        ("resource_name", partial.resource_name),
        ("resource_type", partial.resource_type),
        ("resource_ns", partial.resource_ns),
        ("provider", partial.provider),
    )

    for field, value in narrowing:
        if value is None:
            raise AmbiguousRefError(key, [ref for ref, _ in remaining])

        remaining = _matching(remaining, field, value)

        if not remaining:
            raise RefNotFoundError(key, available)

        if len(remaining) == 1:
            return remaining[0]

    raise AmbiguousRefError(key, [ref for ref, _ in remaining])


class RefRegistry(Generic[T]):
    """In-process mapping of qualified refs to construct handles.

    One registry is owned by each deployment definition run.
    """

    def __init__(self, entries: Optional[Mapping[Ref, T]] = None) -> None:
        self._entries: Dict[Ref, T] = dict(entries or {})

    def add(self, ref: Ref, handle: T) -> None:
        LOG.debug("Registering %s", ref)
        self._entries[ref] = handle

    def get(self, ref: Ref) -> Optional[T]:
        return self._entries.get(ref)

    def resolve(self, key: str) -> T:
        ref, handle = resolve_ref(self._entries, key)
        LOG.debug("Resolved %s to %s", key, ref)
        return handle

    def refs(self) -> Iterable[Ref]:
        return list(self._entries.keys())

    def __contains__(self, ref) -> bool:
        return ref in self._entries

    def __len__(self) -> int:
        return len(self._entries)
