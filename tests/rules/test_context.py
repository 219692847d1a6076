import pytest
from buildmatrix.rules import (
    ContainsRule,
    PatternRule,
    FallbackRule,
    DISTRO_RULES,
    first_match,
    infer_context,
    infer_distro,
    infer_version,
)


class TestInferContext:
    """Tests for the `<version>/<distro>` inference in buildmatrix.rules.context."""

    @pytest.mark.parametrize("tag, expected", [
        ("1.29.1-debian-12-r0", "1.29/debian-12"),
        ("2.0.0-ubuntu-22.04-r3", "2.0/ubuntu-22.04"),
        ("3.1.4-alpine-3.18-r1", "3.1/alpine-3.18"),
        ("9.9.9-alpine-r0", "9.9/alpine"),
        ("nightly", "latest/debian-12"),
    ])
    def test_inference_table(self, tag, expected):
        assert infer_context(tag) == expected

    @pytest.mark.parametrize("tag, expected", [
        ("1.29.1-debian-12-r0", "1.29"),
        ("10.11-debian-12", "10.11"),
        ("1.29", "1.29"),
        ("v1.29.1", "latest"),        # must start with the digits
        ("1-debian-12", "latest"),    # minor part required
        ("", "latest"),
    ])
    def test_version_prefix(self, tag, expected):
        assert infer_version(tag) == expected

    @pytest.mark.parametrize("tag, expected", [
        # debian-12 outranks every later rule
        ("1.0.0-alpine-3.18-debian-12", "debian-12"),
        # ubuntu outranks alpine
        ("1.0.0-alpine-ubuntu-22.04", "ubuntu-22.04"),
        # versioned alpine outranks bare alpine
        ("1.0.0-alpine-3.19", "alpine-3.19"),
        ("1.0.0-alpine-3", "alpine"),
        # markers need their leading dash
        ("alpine", "debian-12"),
        ("1.0.0-ubuntu-20.04", "debian-12"),
    ])
    def test_distro_priority(self, tag, expected):
        assert infer_distro(tag) == expected

    def test_custom_rules_can_be_prepended(self):
        """New distros slot in ahead of the fallback without touching the others."""
        rules = (ContainsRule("-rocky-9", "rocky-9"),) + tuple(DISTRO_RULES)
        assert infer_context("1.2.3-rocky-9-r0", distro_rules=rules) == "1.2/rocky-9"
        assert infer_context("1.2.3-alpine-r0", distro_rules=rules) == "1.2/alpine"

    def test_rule_lists_without_fallback_use_defaults(self):
        only_ubuntu = [ContainsRule("-ubuntu-22.04", "ubuntu-22.04")]
        assert infer_context("nightly", version_rules=[], distro_rules=only_ubuntu) == "latest/debian-12"


class TestRule:
    """Tests for the individual rule types."""

    def test_contains_rule(self):
        rule = ContainsRule("-debian-12", "debian-12")
        assert rule.apply("1.0-debian-12-r1") == "debian-12"
        assert rule.apply("1.0-debian-11") is None
        assert "1.0-debian-12" in rule
        assert ("1.0-debian-11" in rule) is False

    def test_pattern_rule_formats_groups(self):
        rule = PatternRule(r"-alpine-([0-9]+\.[0-9]+)", "alpine-{0}")
        assert rule.apply("3.1.4-alpine-3.18-r1") == "alpine-3.18"
        assert rule.apply("3.1.4-alpine-r1") is None

    def test_fallback_always_applies(self):
        assert FallbackRule("x").apply("anything") == "x"

    def test_contains_non_string(self):
        rule = ContainsRule("-alpine", "alpine")
        assert (None in rule) is False
        assert (123 in rule) is False

    def test_first_match_respects_order(self):
        rules = [FallbackRule("first"), FallbackRule("second")]
        assert first_match(rules, "tag") == "first"
        assert first_match([], "tag") is None
