"""Resolves ARN references from a rendered Ref, an ARN, or a partial ref."""
import logging
from typing import Optional

from aws_cdk import Fn

from naming.errors import MalformedRefError
from naming.ref import Ref

LOG = logging.getLogger(__name__)

ARN_PREFIX = "arn:"


def arn_for(value: str) -> Optional[str]:
    """Given an arn or a rendered Ref, return the arn.

    A Ref is imported with Fn.import_value, an arn is returned as is.

    Returns:
        The arn, or None if the value is neither.
    """
    if value is None:
        raise ValueError("value must not be null")

    if Ref.is_ref(value):
        return Fn.import_value(value)

    if value.startswith(ARN_PREFIX):
        return value

    return None


def resolve_arn(app, value: str) -> str:
    """Resolve an arn, a rendered Ref, or a resource-ns:resource-type:resource-name triple.

    A triple is qualified with the stage, scope name and scope version of the
    given ScopedApp and imported as an arn ref exported by another deployment.

    Raises:
        MalformedRefError: if the value is none of the above.
    """
    arn = arn_for(value)

    if arn is not None:
        return arn

    segments = value.split(":")

    if len(segments) != 3:
        raise MalformedRefError(value, "unknown reference type")

    resource_ns, resource_type, resource_name = segments

    export_name = Ref.arn_ref() \
        .with_provider("aws") \
        .with_stage(app.scoped_stage) \
        .with_scope(app.scoped_name) \
        .with_scope_version(app.scoped_version) \
        .with_resource_ns(resource_ns) \
        .with_resource_type(resource_type) \
        .with_resource_name(resource_name) \
        .export_name()

    LOG.debug("Importing %s as %s", value, export_name)

    return Fn.import_value(export_name)
