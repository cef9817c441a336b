"""Scoped stack module.

Stacks of a ScopedApp export names, ids and arns under Ref export names so
other stacks, in this app or in other deployments, can import them:

    ref = self.with_scope(Ref.ref().with_resource_ns("storage").with_resource_type("bucket").with_resource_name("landing"))
    self.export_arn_ref_for(ref, bucket.bucket_arn, "landing bucket arn", construct=bucket)
"""
import logging
from typing import List, Optional, Type, TypeVar

from constructs import Construct
from aws_cdk import Stack, Token

from naming.fixed import Stage, Version
from naming.label import Label
from naming.ref import Qualifier, Ref
from stacks.scoped.output_construct import OutputConstruct
from stacks.scoped.scoped_app import ScopedApp

LOG = logging.getLogger(__name__)

C = TypeVar("C", bound=Construct)


class ScopedStack(Stack):
    """CDK Stack belonging to a ScopedApp."""

    def __init__(self, app: ScopedApp, construct_id: Optional[str] = None, **kwargs) -> None:
        if not isinstance(app, ScopedApp):
            raise TypeError(f"ScopedStack requires a ScopedApp, found: {type(app).__name__}")

        super().__init__(app, construct_id, **kwargs)

        self.scoped_app = app

    @staticmethod
    def scoped_of(construct: Construct) -> "ScopedStack":
        stack = Stack.of(construct)

        if isinstance(stack, ScopedStack):
            return stack

        raise ValueError(f"construct does not belong to a ScopedStack, found: {type(stack).__name__}")

    @property
    def scoped_stage(self) -> Stage:
        return self.scoped_app.scoped_stage

    @property
    def scoped_name(self) -> Label:
        return self.scoped_app.scoped_name

    @property
    def scoped_version(self) -> Version:
        return self.scoped_app.scoped_version

    def with_context(self, ref: Ref) -> Ref:
        """Add the aws provider and the current stage to the given ref."""
        return ref \
            .with_provider("aws") \
            .with_stage(self.scoped_stage)

    def with_scope(self, ref: Ref) -> Ref:
        """Add the scope name and version to the given ref."""
        return ref \
            .with_scope(self.scoped_name) \
            .with_scope_version(self.scoped_version)

    def export_name_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                            construct: Optional[Construct] = None) -> str:
        return self._export_ref_for(Qualifier.NAME, ref, value, description, construct)

    def export_id_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                          construct: Optional[Construct] = None) -> str:
        return self._export_ref_for(Qualifier.ID, ref, value, description, construct)

    def export_arn_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                           construct: Optional[Construct] = None) -> str:
        return self._export_ref_for(Qualifier.ARN, ref, value, description, construct)

    def _export_ref_for(self, qualifier: Qualifier, ref: Ref, value: str, description: Optional[str],
                        construct: Optional[Construct]) -> str:
        """Export the value under the qualified ref.

        Records the export name, and the value when it is not a token, in the
        app metadata under the resource type, and registers the construct, if
        any, so stacks of this app can resolve it locally.

        Returns:
            The export name.
        """
        qualified_ref = self.with_context(ref).with_qualifier(qualifier)
        output = OutputConstruct(self, qualified_ref, value, description)

        meta = self.scoped_app.scoped_meta
        resource_type = ref.resource_type.value

        if qualifier is Qualifier.NAME:
            meta.set_name_ref(resource_type, output.export_name)
        elif qualifier is Qualifier.ID:
            meta.set_id_ref(resource_type, output.export_name)
        else:
            meta.set_arn_ref(resource_type, output.export_name)

        if not Token.is_unresolved(value):
            if qualifier is Qualifier.NAME:
                meta.set_name(resource_type, value)
            elif qualifier is Qualifier.ID:
                meta.set_id(resource_type, value)
            else:
                meta.set_arn(resource_type, value)

        if construct is not None:
            self.scoped_app.add_local_construct(qualified_ref, construct)

        LOG.debug("Exported %s", output.export_name)

        return output.export_name

    def find_having(self, construct_type: Type[C]) -> List[C]:
        return [node for node in self.node.find_all() if isinstance(node, construct_type)]
