"""Storage stack module.

Creates an S3 bucket with a globally unique scoped name and exports both its
name and arn under Refs in the storage namespace.
"""
from aws_cdk import (
    RemovalPolicy,
    aws_s3 as s3,
)

from naming.ref import Ref
from stacks.resources.resource_names import global_unique_scoped_name
from stacks.scoped.scoped_app import ScopedApp
from stacks.scoped.scoped_stack import ScopedStack


class BucketStack(ScopedStack):
    """Scoped stack for an S3 bucket.

    Exports the bucket name and arn, registering the bucket with its arn export
    for local resolution.
    """

    def __init__(self, app: ScopedApp, construct_id: str, bucket_name: str, **kwargs) -> None:
        super().__init__(app, construct_id, **kwargs)

        # bucket names must be lower case, the stage renders upper case
        self.bucket = s3.Bucket(self, "Bucket",
            bucket_name=global_unique_scoped_name(self, bucket_name).lower(),
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            removal_policy=RemovalPolicy.RETAIN,
        )

        self.bucket_ref = self.with_scope(Ref.ref()
            .with_resource_ns("storage")
            .with_resource_type("bucket")
            .with_resource_name(bucket_name)
        )

        self.export_name_ref_for(self.bucket_ref, self.bucket.bucket_name, "bucket name")
        self.export_arn_ref_for(self.bucket_ref, self.bucket.bucket_arn, "bucket arn", construct=self.bucket)
