"""Scoped application module.

A ScopedApp is the CDK App of one deployment definition run. It carries the
stage, scope name and scope version every Ref and resource name is qualified
with, and owns the registry of exported constructs and the export metadata.

Stage, name and version are read from the CDK context when not given:

    cdk synth -c stage=dev -c scope_name=projectA -c scope_version=20230101
"""
import logging
from typing import Callable, Optional, TypeVar, Union

from constructs import Construct
from aws_cdk import App

from naming.errors import MalformedRefError, RefNotFoundError
from naming.fixed import Stage, Version
from naming.label import Label
from naming.ref import Ref
from naming.registry import RefRegistry
from stacks.resources.arn_refs import resolve_arn
from stacks.scoped.scoped_meta import ScopedMeta

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class ScopedApp(App):
    """CDK App qualified by stage, scope name and scope version."""

    def __init__(self,
            stage: Union[str, Stage, None] = None,
            name: Union[str, Label, None] = None,
            version: Union[str, Version, None] = None,
            *,
            registry: Optional[RefRegistry] = None,
            meta: Optional[ScopedMeta] = None,
            **kwargs) -> None:
        super().__init__(**kwargs)

        if stage is None:
            stage = self.node.try_get_context("stage")

        if name is None:
            name = self.node.try_get_context("scope_name")
        if not name:
            raise ValueError("No 'scope_name' given or found in context")

        if version is None:
            version = self.node.try_get_context("scope_version")
        if version is None:
            raise ValueError("No 'scope_version' given or found in context")

        self.scoped_stage = (stage if isinstance(stage, Stage) else Stage.of(stage)).as_lower()
        self.scoped_name = Label.of(name)
        self.scoped_version = version if isinstance(version, Version) else Version.of(str(version))
        self.registry = registry if registry is not None else RefRegistry()
        self.scoped_meta = meta if meta is not None else ScopedMeta()

    def add_local_construct(self, ref: Ref, construct: Construct) -> None:
        self.registry.add(ref, construct)

    def get_local_construct(self, ref: Ref) -> Optional[Construct]:
        return self.registry.get(ref)

    def resolve_local_construct(self, relative_type_ref: str) -> Construct:
        """Resolve a construct exported in this app from a partial ref.

        Args:
            relative_type_ref: [provider:]resource-ns:resource-type:resource-name,
                only the resource name is required.

        Raises:
            MalformedRefError: if more than four segments are given.
            RefNotFoundError: if nothing matches.
            AmbiguousRefError: if more than one construct matches.
        """
        return self.registry.resolve(relative_type_ref)

    def import_arn_ref(self, ref: str, resolver: Callable[[str], T]) -> Union[Construct, T]:
        """Return the construct exported under the given ref.

        A construct exported earlier in this app is returned as is. Otherwise the
        ref is treated as an arn, a rendered ref, or a resource-ns:resource-type:resource-name
        triple exported by another deployment, and the imported arn is handed to
        the resolver.

        Args:
            ref: the reference to import.
            resolver: turns an arn, usually a token, into a construct.
        """
        if ref is None:
            raise ValueError("ref may not be null")

        try:
            return self.resolve_local_construct(ref)
        except (RefNotFoundError, MalformedRefError) as e:
            LOG.debug("No local construct for %s, importing: %s", ref, e)

        return resolver(resolve_arn(self, ref))
