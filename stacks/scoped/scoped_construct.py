"""Scoped construct module.

Base class for constructs that name, export and import resources within the
scope of the ScopedStack they are created in.
"""
from typing import Callable, Optional, TypeVar, Union

from constructs import Construct

from naming.fixed import Stage, Version
from naming.label import Label
from naming.ref import Ref
from stacks.scoped.scoped_stack import ScopedStack

T = TypeVar("T")


class ScopedConstruct(Construct):
    """Construct with access to the stage, scope and exports of its ScopedStack.

    Must be created within a ScopedStack.
    """

    def __init__(self, scope: Construct, construct_id: str) -> None:
        super().__init__(scope, construct_id)

    @property
    def scoped_stack(self) -> ScopedStack:
        return ScopedStack.scoped_of(self)

    @property
    def scoped_stage(self) -> Stage:
        return self.scoped_stack.scoped_stage

    @property
    def scoped_name(self) -> Label:
        return self.scoped_stack.scoped_name

    @property
    def scoped_version(self) -> Version:
        return self.scoped_stack.scoped_version

    def export_arn_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                           construct: Optional[Construct] = None) -> str:
        return self.scoped_stack.export_arn_ref_for(ref, value, description, construct)

    def export_id_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                          construct: Optional[Construct] = None) -> str:
        return self.scoped_stack.export_id_ref_for(ref, value, description, construct)

    def export_name_ref_for(self, ref: Ref, value: str, description: Optional[str] = None,
                            construct: Optional[Construct] = None) -> str:
        return self.scoped_stack.export_name_ref_for(ref, value, description, construct)

    def import_arn_ref(self, ref: str, resolver: Callable[[str], T]) -> Union[Construct, T]:
        """Import the arn exported under the given ref, see ScopedApp.import_arn_ref."""
        return self.scoped_stack.scoped_app.import_arn_ref(ref, resolver)

    def resolve_local_construct(self, relative_type_ref: str) -> Construct:
        return self.scoped_stack.scoped_app.resolve_local_construct(relative_type_ref)
