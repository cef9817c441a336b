"""Resource names qualified by stage, scope, account and region.

- global unique: stage, name, account and region, for globally named resources
  like S3 buckets
- account unique: stage, name and region
- region unique: stage and name, optionally followed by a qualifier

The *_scoped_* variants also add the scope name before the name and the scope
version after it. Names render as lower hyphen with the stage upper cased:

    global_unique_name(stack, "landing")  # "DEV-landing-111111111111-eu-west-1"
"""
from typing import Optional

from constructs import Construct
from aws_cdk import Stack

from naming.fixed import Fixed, Region
from naming.label import Label
from stacks.scoped.scoped_stack import ScopedStack


def _require_name(name) -> None:
    if name is None:
        raise ValueError("name may not be null")


def _region(scope: Construct) -> Label:
    return Region.of(Stack.of(scope).region)


def _account(scope: Construct) -> Label:
    return Fixed.of(Stack.of(scope).account)


def global_unique_name(scope: Construct, name: str) -> str:
    return global_unique_label(scope, name).lower_hyphen()


def global_unique_label(scope: Construct, name) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(name) \
        .with_(_account(scope)) \
        .with_(_region(scope))


def global_unique_scoped_name(scope: Construct, name: str) -> str:
    return global_unique_scoped_label(scope, name).lower_hyphen()


def global_unique_scoped_label(scope: Construct, name) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(stack.scoped_name) \
        .with_(name) \
        .with_(stack.scoped_version) \
        .with_(_account(scope)) \
        .with_(_region(scope))


def account_unique_name(scope: Construct, name: str) -> str:
    return account_unique_label(scope, name).lower_hyphen()


def account_unique_label(scope: Construct, name) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(name) \
        .with_(_region(scope))


def account_unique_scoped_name(scope: Construct, name: str) -> str:
    return account_unique_scoped_label(scope, name).lower_hyphen()


def account_unique_scoped_label(scope: Construct, name) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(stack.scoped_name) \
        .with_(name) \
        .with_(stack.scoped_version) \
        .with_(_region(scope))


def region_unique_name(scope: Construct, name: str) -> str:
    _require_name(name)
    return region_unique_label(scope, Label.of(name)).lower_hyphen()


def region_unique_label(scope: Construct, name, qualifier: Optional[Label] = Label.NULL) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(name) \
        .with_(qualifier)


def region_unique_scoped_name(scope: Construct, name: str) -> str:
    _require_name(name)
    return region_unique_scoped_label(scope, Label.of(name)).lower_hyphen()


def region_unique_scoped_label(scope: Construct, name, qualifier: Optional[Label] = Label.NULL) -> Label:
    _require_name(name)
    stack = ScopedStack.scoped_of(scope)

    return stack.scoped_stage.upper_only() \
        .with_(stack.scoped_name) \
        .with_(name) \
        .with_(stack.scoped_version) \
        .with_(qualifier)
