"""Network stack module.

Defines a multi-AZ VPC named after the stage and scope, and exports its id
under a Ref so other stacks can resolve it:
- Public subnets for load balancers
- Private subnets with egress for workloads
- ref:aws:id:<stage>:<scope>:<version>:network:vpc:<vpc-name>
"""
import ipaddress
from aws_cdk import (
    aws_ec2 as ec2,
)

from naming.ref import Ref
from stacks.resources.resource_names import region_unique_scoped_name
from stacks.scoped.scoped_app import ScopedApp
from stacks.scoped.scoped_stack import ScopedStack


class NetworkStack(ScopedStack):
    """Scoped stack for VPC and networking resources.

    Creates a multi-AZ VPC with public and private subnets and exports the VPC
    id, registering the VPC for local resolution.
    """

    def __init__(self, app: ScopedApp,
            construct_id: str,
            vpc_cidr: str,
            vpc_name: str = "main",
            **kwargs) -> None:
        super().__init__(app, construct_id, **kwargs)

        self.vpc_cidr = vpc_cidr

        try:
            ipaddress.ip_network(self.vpc_cidr)
        except ValueError as e:
            raise ValueError(f"Invalid VPC CIDR block: {self.vpc_cidr}") from e

        self.vpc = ec2.Vpc(self, "Vpc",
            ip_addresses=ec2.IpAddresses.cidr(self.vpc_cidr),
            max_azs=2,
            vpc_name=region_unique_scoped_name(self, vpc_name),
            nat_gateways=1,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=24
                ),
                ec2.SubnetConfiguration(
                    name="workers",
                    subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                    cidr_mask=20
                )
            ],
        )

        self.vpc_ref = self.with_scope(Ref.ref()
            .with_resource_ns("network")
            .with_resource_type("vpc")
            .with_resource_name(vpc_name)
        )

        self.export_id_ref_for(self.vpc_ref, self.vpc.vpc_id, "VPC id", construct=self.vpc)
