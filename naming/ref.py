"""Ref module.

A Ref is the identifier used as an export/import key for values one stack
publishes and another consumes:

    ref:<provider>:<qualifier>:[<stage>:]<scope>:<scope-version>:<resource-ns>:<resource-type>:<resource-name>

Where the qualifier is the kind of value exported (name, id or arn), the stage
is optional, scope and scope version are the application name and version,
and resources are identified by a namespace, type and name. For example:

    ref:aws:id:project-a:20230101:core:compute:spot
    ref:aws:id:dev:project-a:20230101:core:compute:spot
"""
from enum import Enum
from typing import Optional, Union

from naming.errors import MissingFieldError
from naming.fixed import Fixed, Stage, Version
from naming.label import Label

REF_PREFIX = "ref:"


class Qualifier(Enum):
    """The kind of value a Ref exports."""

    NAME = "Name"
    ID = "Id"
    ARN = "Arn"

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["Qualifier"]:
        if value is None:
            return None
        return _QUALIFIERS.get(value.lower())


_QUALIFIERS = {Label.of(qualifier).lower_hyphen(): qualifier for qualifier in Qualifier}


def _as_fixed(value: Union[str, Label]) -> Fixed:
    if isinstance(value, Fixed):
        return value
    return Fixed.of(Label.of(value).lower_hyphen())


class Ref:
    """Immutable, structured reference identifier.

    Every with_* method returns a new Ref with that one field replaced.
    """

    __slots__ = ("_provider", "_qualifier", "_stage", "_scope", "_scope_version",
                 "_resource_ns", "_resource_type", "_resource_name")

    def __init__(self, provider: Optional[Fixed] = None, qualifier: Optional[Qualifier] = None,
                 stage: Optional[Stage] = None, scope: Optional[Fixed] = None,
                 scope_version: Optional[Version] = None, resource_ns: Optional[Fixed] = None,
                 resource_type: Optional[Fixed] = None, resource_name: Optional[Fixed] = None) -> None:
        self._provider = provider if provider is not None else Fixed.fixed_null()
        self._qualifier = qualifier
        self._stage = stage.as_lower() if stage is not None else Stage.null_stage()
        self._scope = scope if scope is not None else Fixed.fixed_null()
        self._scope_version = scope_version if scope_version is not None else Version.version_null()
        self._resource_ns = resource_ns if resource_ns is not None else Fixed.fixed_null()
        self._resource_type = resource_type if resource_type is not None else Fixed.fixed_null()
        self._resource_name = resource_name if resource_name is not None else Fixed.fixed_null()

    @classmethod
    def ref(cls) -> "Ref":
        return cls()

    @classmethod
    def id_ref(cls) -> "Ref":
        return cls().with_qualifier(Qualifier.ID)

    @classmethod
    def arn_ref(cls) -> "Ref":
        return cls().with_qualifier(Qualifier.ARN)

    @classmethod
    def name_ref(cls) -> "Ref":
        return cls().with_qualifier(Qualifier.NAME)

    @staticmethod
    def is_ref(value: Optional[str]) -> bool:
        return value is not None and value.startswith(REF_PREFIX)

    @staticmethod
    def qualifier_of(value: Optional[str]) -> Optional[Qualifier]:
        """Return the qualifier of a rendered ref string, None if not a ref."""
        if not Ref.is_ref(value):
            return None
        parts = value.split(":")
        return Qualifier.lookup(parts[2]) if len(parts) > 2 else None

    @staticmethod
    def provider_of(value: Optional[str]) -> Optional[str]:
        """Return the provider of a rendered ref string, None if not a ref."""
        if not Ref.is_ref(value):
            return None
        parts = value.split(":")
        return (parts[1] or None) if len(parts) > 1 else None

    def _replace(self, **changes) -> "Ref":
        fields = {name[1:]: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return Ref(**fields)

    def with_provider(self, provider: Union[str, Label]) -> "Ref":
        if provider is None:
            raise ValueError("provider may not be null")
        provider = _as_fixed(provider)
        Label.require_non_empty(provider, "provider may not be empty")
        return self._replace(provider=provider)

    def with_qualifier(self, qualifier: Optional[Qualifier]) -> "Ref":
        return self._replace(qualifier=qualifier)

    def with_stage(self, stage: Union[str, Fixed, None]) -> "Ref":
        if stage is None:
            stage = Stage.null_stage()
        elif not isinstance(stage, Stage):
            stage = Stage.of(stage.value if isinstance(stage, Fixed) else stage)
        return self._replace(stage=stage)

    def with_scope(self, scope: Union[str, Label]) -> "Ref":
        return self._replace(scope=_as_fixed(scope))

    def with_scope_version(self, scope_version: Union[str, Fixed]) -> "Ref":
        if isinstance(scope_version, Version):
            return self._replace(scope_version=scope_version)
        if isinstance(scope_version, Fixed):
            scope_version = scope_version.lower_hyphen()
        return self._replace(scope_version=Version.of(scope_version))

    def with_resource_ns(self, resource_ns: Union[str, Label]) -> "Ref":
        return self._replace(resource_ns=_as_fixed(resource_ns))

    def with_resource_type(self, resource_type: Union[str, Label]) -> "Ref":
        return self._replace(resource_type=_as_fixed(resource_type))

    def with_resource_name(self, resource_name: Union[str, Label]) -> "Ref":
        return self._replace(resource_name=_as_fixed(resource_name))

    @property
    def provider(self) -> Fixed:
        return self._provider

    @property
    def qualifier(self) -> Optional[Qualifier]:
        return self._qualifier

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def scope(self) -> Fixed:
        return self._scope

    @property
    def scope_version(self) -> Version:
        return self._scope_version

    @property
    def resource_ns(self) -> Fixed:
        return self._resource_ns

    @property
    def resource_type(self) -> Fixed:
        return self._resource_type

    @property
    def resource_name(self) -> Fixed:
        return self._resource_name

    def resource_label(self) -> Label:
        _require("resource_ns", self._resource_ns)
        _require("resource_type", self._resource_type)
        _require("resource_name", self._resource_name)

        return Label.NULL \
            .with_(self._resource_ns) \
            .with_(Label.of(self._resource_type.value)) \
            .with_(self._resource_name)

    def label(self) -> Label:
        """Return the canonical Label of this Ref.

        Raises:
            MissingFieldError: naming the first required field that is absent.
                Only the stage is optional.
        """
        _require("provider", self._provider)
        if self._qualifier is None:
            raise MissingFieldError("qualifier")
        _require("scope", self._scope)
        _require("scope_version", self._scope_version)
        _require("resource_ns", self._resource_ns)
        _require("resource_type", self._resource_type)
        _require("resource_name", self._resource_name)

        return self._chain()

    def export_name(self) -> str:
        return self.label().lower_colon_path()

    def _chain(self) -> Label:
        return Label.of("ref") \
            .with_(self._provider) \
            .with_(self._qualifier) \
            .with_(self._stage) \
            .with_(self._scope) \
            .with_(self._scope_version) \
            .with_(self._resource_ns) \
            .with_(self._resource_type) \
            .with_(self._resource_name)

    def _key(self):
        return (self._provider, self._qualifier, self._stage, self._scope, self._scope_version,
                self._resource_ns, self._resource_type, self._resource_name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._chain().lower_colon_path()

    def __repr__(self) -> str:
        return f"Ref({self})"


def _require(field: str, label: Label) -> None:
    if label is None or label.is_null():
        raise MissingFieldError(field)
