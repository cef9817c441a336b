"""Platform consumer stack module.

Imports a bucket by partial ref and grants a role read access to it:
- a bucket exported in this app resolves to the bucket construct itself
- any other ref is imported with Fn::ImportValue from the deployment exporting it
"""
from constructs import Construct
from aws_cdk import (
    aws_iam as iam,
    aws_s3 as s3,
)

from naming.ref import Ref
from stacks.resources.resource_names import account_unique_scoped_name
from stacks.scoped.scoped_app import ScopedApp
from stacks.scoped.scoped_construct import ScopedConstruct
from stacks.scoped.scoped_stack import ScopedStack


class BucketReader(ScopedConstruct):
    """Role allowed to read the bucket exported under the given ref."""

    def __init__(self, scope: Construct, construct_id: str, bucket_ref: str) -> None:
        super().__init__(scope, construct_id)

        self.bucket = self.import_arn_ref(
            bucket_ref,
            lambda arn: s3.Bucket.from_bucket_arn(self, "ImportedBucket", arn)
        )

        self.role = iam.Role(self, "ReaderRole",
            role_name=account_unique_scoped_name(self, "bucket-reader"),
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
        )

        self.bucket.grant_read(self.role)

        role_ref = self.scoped_stack.with_scope(Ref.ref()
            .with_resource_ns("platform")
            .with_resource_type("role")
            .with_resource_name("bucketReader")
        )

        self.export_arn_ref_for(role_ref, self.role.role_arn, "bucket reader role arn", construct=self.role)


class ConsumerStack(ScopedStack):
    """Scoped stack holding a BucketReader for the bucket under bucket_ref."""

    def __init__(self, app: ScopedApp, construct_id: str, *, bucket_ref: str, **kwargs) -> None:
        super().__init__(app, construct_id, **kwargs)

        self.reader = BucketReader(self, "BucketReader", bucket_ref)
