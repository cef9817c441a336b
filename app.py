#!/usr/bin/env python3
"""CDK application entrypoint.

Defines and synthesizes the stacks of one scoped deployment:
1. NetworkStack: VPC, exporting its id under a network:vpc ref.
2. BucketStack: landing bucket, exporting its name and arn under storage:bucket refs.
3. ConsumerStack: role reading the landing bucket, imported by partial ref.

Stage, scope name and scope version come from the CDK context (see cdk.json):

    cdk synth -c stage=prod -c scope_version=20240101
"""

import aws_cdk as cdk
from stacks.network.network_stack import NetworkStack
from stacks.platform.consumer_stack import ConsumerStack
from stacks.scoped.scoped_app import ScopedApp
from stacks.storage.bucket_stack import BucketStack

app = ScopedApp()

stage_name = app.scoped_stage.value or "dev"
env_context = app.node.try_get_context(stage_name)
if not env_context:
    raise ValueError(f"No context found for stage '{stage_name}'. Available stages: dev, prod")

env = cdk.Environment(
    account=env_context["account_id"],
    region=env_context["region"]
)

print(f"Synthesizing {app.scoped_name.lower_hyphen()}:{app.scoped_version.value} for stage: {stage_name} "
      f"(Account: {env.account}, Region: {env.region})")

network_stack = NetworkStack(app, "NetworkStack",
    vpc_cidr=env_context["vpc_cidr"],
    env=env
)

bucket_stack = BucketStack(app, "BucketStack",
    bucket_name="landing",
    env=env
)

consumer_stack = ConsumerStack(app, "ConsumerStack",
    bucket_ref="bucket:landing",
    env=env
)

consumer_stack.add_dependency(bucket_stack)

app.synth()
