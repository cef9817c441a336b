"""Unit tests for partial ref parsing and progressive resolution.

Tests that resolution always matches the resource name first, only narrows by
type, namespace and provider when those segments are given, and reports
malformed, missing and ambiguous keys.
"""
import pytest

from naming.errors import AmbiguousRefError, MalformedRefError, RefNotFoundError
from naming.ref import Qualifier, Ref
from naming.registry import RefRegistry, parse_partial_ref, resolve_ref


def make_ref(name="spot", resource_type="compute", ns="core", provider="aws", qualifier=Qualifier.ARN) -> Ref:
    """Build a fully qualified ref for registry tests."""
    return Ref() \
        .with_provider(provider) \
        .with_qualifier(qualifier) \
        .with_stage("dev") \
        .with_scope("projectA") \
        .with_scope_version("20230101") \
        .with_resource_ns(ns) \
        .with_resource_type(resource_type) \
        .with_resource_name(name)


def test_parse_partial_ref_is_right_anchored():
    """Test the last segment is always the resource name."""
    assert parse_partial_ref("spot").resource_name == "spot"
    assert parse_partial_ref("spot").resource_type is None

    partial = parse_partial_ref("compute:spot")
    assert (partial.resource_type, partial.resource_name) == ("compute", "spot")
    assert partial.resource_ns is None

    partial = parse_partial_ref("aws:core:compute:spot")
    assert (partial.provider, partial.resource_ns, partial.resource_type, partial.resource_name) == \
        ("aws", "core", "compute", "spot")


def test_parse_partial_ref_rejects_too_many_segments():
    """Test more than four segments is malformed."""
    with pytest.raises(MalformedRefError):
        parse_partial_ref("ref:aws:core:compute:spot")
    with pytest.raises(ValueError):
        parse_partial_ref(None)


def test_resolve_by_name():
    """Test a unique resource name resolves on its own."""
    spot = make_ref("spot")
    candidates = {spot: "spot-handle", make_ref("onDemand"): "on-demand-handle"}
    assert resolve_ref(candidates, "spot") == (spot, "spot-handle")


def test_name_match_is_canonical_and_case_insensitive():
    """Test names match regardless of case format."""
    candidates = {make_ref("onDemand"): "handle"}
    for key in ["on-demand", "onDemand", "OnDemand", "ON-DEMAND", "on_demand"]:
        assert resolve_ref(candidates, key)[1] == "handle"

    assert resolve_ref({make_ref("spot"): "handle"}, "SPOT")[1] == "handle"

    compute = make_ref("spot", resource_type="compute")
    pricing = make_ref("spot", resource_type="pricing")
    assert resolve_ref({compute: "a", pricing: "b"}, "COMPUTE:spot") == (compute, "a")
    assert resolve_ref({compute: "a", pricing: "b"}, "Pricing:SPOT") == (pricing, "b")


def test_empty_registry_not_found():
    """Test resolution against no candidates fails as not found."""
    with pytest.raises(RefNotFoundError) as exc_info:
        resolve_ref({}, "spot")
    assert exc_info.value.key == "spot"


def test_unknown_name_not_found():
    """Test an unmatched name fails as not found listing what is available."""
    candidates = {make_ref("spot"): "handle"}
    with pytest.raises(RefNotFoundError) as exc_info:
        resolve_ref(candidates, "compute:reserved")
    assert exc_info.value.available == [make_ref("spot")]


def test_ambiguous_name_needs_type():
    """Test two candidates differing only by type need the type segment."""
    compute = make_ref("spot", resource_type="compute")
    pricing = make_ref("spot", resource_type="pricing")
    candidates = {compute: "compute-handle", pricing: "pricing-handle"}

    with pytest.raises(AmbiguousRefError) as exc_info:
        resolve_ref(candidates, "spot")
    assert set(exc_info.value.candidates) == {compute, pricing}

    assert resolve_ref(candidates, "compute:spot") == (compute, "compute-handle")
    assert resolve_ref(candidates, "pricing:spot") == (pricing, "pricing-handle")


def test_type_mismatch_not_found():
    """Test a supplied type that matches nothing fails as not found."""
    candidates = {make_ref("spot", resource_type="compute"): "a", make_ref("spot", resource_type="pricing"): "b"}
    with pytest.raises(RefNotFoundError):
        resolve_ref(candidates, "storage:spot")


def test_ambiguous_type_needs_namespace():
    """Test candidates differing only by namespace need the namespace segment."""
    core = make_ref(ns="core")
    edge = make_ref(ns="edge")
    candidates = {core: "core-handle", edge: "edge-handle"}

    with pytest.raises(AmbiguousRefError):
        resolve_ref(candidates, "compute:spot")

    assert resolve_ref(candidates, "edge:compute:spot") == (edge, "edge-handle")


def test_ambiguous_namespace_needs_provider():
    """Test candidates differing only by provider need all four segments."""
    aws = make_ref(provider="aws")
    gcp = make_ref(provider="gcp")
    candidates = {aws: "aws-handle", gcp: "gcp-handle"}

    with pytest.raises(AmbiguousRefError):
        resolve_ref(candidates, "core:compute:spot")

    assert resolve_ref(candidates, "gcp:core:compute:spot") == (gcp, "gcp-handle")

    with pytest.raises(RefNotFoundError):
        resolve_ref(candidates, "azure:core:compute:spot")


def test_ambiguous_after_all_segments():
    """Test candidates differing only by qualifier stay ambiguous."""
    candidates = {make_ref(qualifier=Qualifier.ARN): "arn", make_ref(qualifier=Qualifier.ID): "id"}
    with pytest.raises(AmbiguousRefError) as exc_info:
        resolve_ref(candidates, "aws:core:compute:spot")
    assert len(exc_info.value.candidates) == 2


def test_resolve_does_not_modify_candidates():
    """Test resolution leaves the candidates untouched."""
    candidates = {make_ref("spot"): "a", make_ref("reserved"): "b"}
    snapshot = dict(candidates)
    resolve_ref(candidates, "spot")
    with pytest.raises(RefNotFoundError):
        resolve_ref(candidates, "missing")
    assert candidates == snapshot


def test_registry():
    """Test the registry stores handles by ref and resolves partial keys."""
    registry = RefRegistry()
    spot = make_ref("spot")
    registry.add(spot, "spot-handle")

    assert len(registry) == 1
    assert spot in registry
    assert registry.get(spot) == "spot-handle"
    assert registry.get(make_ref("other")) is None
    assert registry.resolve("core:compute:spot") == "spot-handle"
    assert list(registry.refs()) == [spot]
