"""Output construct module.

Wraps the CfnOutput a ScopedStack exports a Ref under, with a construct id
derived from the resource label and qualifier so each ref is exported once.
"""
from typing import Optional

from constructs import Construct
from aws_cdk import CfnOutput

from naming.label import Label
from naming.ref import Ref


class OutputConstruct(Construct):
    """Publishes a value as a stack output exported under the Ref export name."""

    def __init__(self, scope: Construct, ref: Ref, value: str, description: Optional[str] = None) -> None:
        resource_label = ref.resource_label()
        super().__init__(scope, Label.of("Output").with_(resource_label).with_(ref.qualifier).camel_case())

        self.export_name = ref.export_name()
        self.output = CfnOutput(self, resource_label.camel_case(),
            export_name=self.export_name,
            value=value,
            description=description
        )
