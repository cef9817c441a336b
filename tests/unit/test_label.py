"""Unit tests for Label composition and rendering.

Tests parsing of hyphen, underscore and camel case input, per-format
rendering of composed labels, the null label identity, abbreviations and the
Fixed, Stage and Version value types.
"""
import pytest

from naming.fixed import Fixed, Stage, Version
from naming.label import Label
from naming.ref import Qualifier

FORMATS = [
    "camel_case",
    "lower_camel_case",
    "lower_colon_path",
    "lower_hyphen",
    "lower_hyphen_path",
    "lower_underscore",
    "upper_underscore",
    "short_camel_case",
    "short_lower_hyphen",
    "short_lower_underscore",
]


def _renders(label):
    """Render a label in every format."""
    return {fmt: getattr(label, fmt)() for fmt in FORMATS}


def test_composed_formats():
    """Test a composed label renders with the separator of each format."""
    label = Label.of("foo").with_("bar").with_("baz")
    assert label.camel_case() == "FooBarBaz"
    assert label.lower_camel_case() == "fooBarBaz"
    assert label.lower_hyphen() == "foo-bar-baz"
    assert label.lower_colon_path() == "foo:bar:baz"
    assert label.lower_underscore() == "foo_bar_baz"
    assert label.upper_underscore() == "FOO_BAR_BAZ"


def test_hyphen_path_keeps_word_boundaries():
    """Test camel case parts stay hyphenated inside a slash path."""
    label = Label.of("foo").with_("barBar").with_("baz")
    assert label.lower_hyphen_path() == "foo/bar-bar/baz"
    assert label.lower_hyphen_path(True) == "foo/bar-bar/baz/"


@pytest.mark.parametrize("value", ["project-a", "a-1b", "spot", "foo--bar", "20230101", "core-compute-spot"])
def test_lower_hyphen_round_trip(value):
    """Test lower hyphen input renders back unchanged."""
    assert Label.of(value).lower_hyphen() == value


@pytest.mark.parametrize("value", ["project_a", "a_1b", "spot", "foo__bar", "core_compute_spot"])
def test_lower_underscore_round_trip(value):
    """Test lower underscore input renders back unchanged."""
    assert Label.of(value).lower_underscore() == value


def test_camel_case_input_is_split_on_upper_case():
    """Test camel case input is split into words before each upper case character."""
    assert Label.of("projectA").lower_hyphen() == "project-a"
    assert Label.of("projectA").camel_case() == "ProjectA"
    assert Label.of("ProjectA").lower_camel_case() == "projectA"
    assert Label.of("spotInstance").lower_underscore() == "spot_instance"


def test_composition_is_associative():
    """Test grouping of composition does not change any rendering."""
    a = Label.of("foo")
    b = Label.of("bar-baz", "bb")
    c = Label.fixed("X1")
    left = a.with_(b).with_(c)
    right = a.with_(b.with_(c))
    assert _renders(left) == _renders(right)
    assert left == right


def test_null_label_is_identity():
    """Test composing with the null label or None returns the other label on either side."""
    label = Label.of("foo").with_("bar")
    assert Label.NULL.with_(label) == label
    assert label.with_(Label.NULL) == label
    assert label.with_(None) is label
    assert label.with_(Fixed.fixed_null()) == label
    assert _renders(Label.NULL.with_(label)) == _renders(label)


def test_null_label_renders_none():
    """Test the null label has no value in any format."""
    assert Label.NULL.is_null()
    assert Label.of(None) is Label.NULL
    for rendered in _renders(Label.NULL).values():
        assert rendered is None


def test_upper_only():
    """Test upper_only returns a fixed, upper cased copy."""
    label = Label.of("dev").upper_only()
    assert isinstance(label, Fixed)
    assert label.lower_hyphen() == "DEV"
    assert label.with_("landing").lower_hyphen() == "DEV-landing"
    assert Label.NULL.upper_only().is_null()


def test_abbreviation():
    """Test short formats use the abbreviation where one is given."""
    label = Label.of("production", "prod")
    assert label.camel_case() == "Production"
    assert label.short_camel_case() == "Prod"
    assert label.abbreviated().lower_hyphen() == "prod"

    composed = Label.of("us-east", "use").with_("bucket")
    assert composed.lower_hyphen() == "us-east-bucket"
    assert composed.short_lower_hyphen() == "use-bucket"
    assert composed.short_lower_underscore() == "use_bucket"


def test_abbreviated_composite_keeps_abbreviation():
    """Test an abbreviated composite keeps its abbreviation when composed further."""
    region = Label.of("us").with_("east").abbreviated("use")
    label = region.with_("bucket")
    assert label.lower_hyphen() == "us-east-bucket"
    assert label.short_lower_hyphen() == "use-bucket"


def test_label_without_abbreviation():
    """Test short formats fall back to the full value."""
    label = Label.of("landing-zone")
    assert label.abbreviated() is label
    assert label.short_lower_hyphen() == "landing-zone"
    assert Label.of("landing", Label.NULL) == Label.of("landing")


def test_fixed_is_verbatim():
    """Test fixed values are never reformatted."""
    account = Label.fixed("123456789012")
    region = Label.fixed("us-east-1")
    assert region.camel_case() == "us-east-1"
    assert region.lower_underscore() == "us-east-1"
    label = Label.of("landing").with_(account).with_(region)
    assert label.lower_hyphen() == "landing-123456789012-us-east-1"
    assert label.camel_case() == "Landing123456789012us-east-1"


def test_enum_label():
    """Test enum members are labels of their value."""
    assert Label.of(Qualifier.ARN).lower_hyphen() == "arn"
    assert Label.of("output").with_(Qualifier.ID).camel_case() == "OutputId"


def test_concat_and_having():
    """Test concat and having fold values into a single label."""
    assert Label.concat(Label.of("a"), None, Label.of("b")).lower_hyphen() == "a-b"
    assert Label.concat().is_null()
    assert Label.of("one").having("two", "three").lower_hyphen_path() == "one/two/three"


def test_this_if_null():
    """Test this_if_null prefers the given label unless it is null."""
    default = Label.of("default")
    assert default.this_if_null(Label.NULL) is default
    assert default.this_if_null(None) is default
    assert default.this_if_null(Label.of("other")).lower_hyphen() == "other"


def test_require_non_empty():
    """Test require_non_empty rejects null labels."""
    Label.require_non_empty(Label.of("value"))
    with pytest.raises(ValueError):
        Label.require_non_empty(Label.NULL)
    with pytest.raises(ValueError):
        Label.require_non_empty(None)


def test_ordering_by_camel_case():
    """Test labels sort by their camel case rendering."""
    labels = sorted([Label.of("zeta"), Label.of("alpha"), Label.of("mid-point")])
    assert [label.lower_hyphen() for label in labels] == ["alpha", "mid-point", "zeta"]


def test_stage_as_lower():
    """Test stages lower case and keep the null sentinel."""
    assert Stage.of("DEV").as_lower().value == "dev"
    assert Stage.null_stage().as_lower() is Stage.null_stage()
    assert Stage.null_stage().is_null()


def test_version_rejects_none():
    """Test a version requires a value."""
    assert Version.of("20230101").lower_hyphen() == "20230101"
    assert Version.version_null().is_null()
    with pytest.raises(ValueError):
        Version.of(None)
