"""
Tests for the Prometheus rule-format models.
"""

import pytest
import yaml

from rulerkit.rules.models import (
    Rule,
    RuleFormatError,
    RuleGroup,
    RuleNamespace,
    dump_rule_groups,
    load_rule_groups,
    parse_rule_namespaces,
)


class TestRule:
    def test_alerting_rule_to_dict(self):
        rule = Rule(alert="InstanceDown", expr="up == 0", for_="5m", labels={"severity": "page"})

        assert rule.is_alerting
        assert rule.to_dict() == {
            "alert": "InstanceDown",
            "expr": "up == 0",
            "for": "5m",
            "labels": {"severity": "page"},
        }

    def test_recording_rule_omits_empty_fields(self):
        rule = Rule(record="job:up:sum", expr="sum by (job) (up)")

        assert not rule.is_alerting
        assert rule.to_dict() == {"record": "job:up:sum", "expr": "sum by (job) (up)"}

    def test_from_dict_reads_for_key(self):
        rule = Rule.from_dict(
            {"alert": "A", "expr": "up == 0", "for": "10m", "keep_firing_for": "15m"}
        )
        assert rule.for_ == "10m"
        assert rule.keep_firing_for == "15m"

    def test_from_dict_stringifies_label_values(self):
        rule = Rule.from_dict({"alert": "A", "expr": "x", "labels": {"priority": 1}})
        assert rule.labels == {"priority": "1"}

    @pytest.mark.parametrize(
        "data",
        [
            {"expr": "up"},
            {"alert": "A", "record": "r", "expr": "up"},
            {"alert": "A"},
            {"alert": "A", "expr": ""},
            "not a mapping",
            {"alert": "A", "expr": "up", "labels": ["x"]},
        ],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises(RuleFormatError):
            Rule.from_dict(data)

    def test_expression_is_not_validated(self):
        rule = Rule.from_dict({"record": "r", "expr": "this is (not promql"})
        assert rule.expr == "this is (not promql"


class TestRuleGroup:
    def test_to_dict_shape(self, sample_group):
        data = sample_group.to_dict()

        assert list(data) == ["name", "interval", "rules"]
        assert data["rules"][0]["alert"] == "HighErrorRate"
        assert data["rules"][1]["record"] == "job:http_requests:rate5m"

    def test_limit_serialized_when_set(self):
        group = RuleGroup(name="g", limit=10, rules=[Rule(record="r", expr="up")])
        assert group.to_dict()["limit"] == 10
        assert RuleGroup.from_dict(group.to_dict()).limit == 10

    def test_yaml_round_trip(self, sample_group):
        assert RuleGroup.from_yaml(sample_group.to_yaml()) == sample_group

    def test_to_yaml_is_a_single_group(self, sample_group):
        data = yaml.safe_load(sample_group.to_yaml())
        assert data["name"] == "g1"
        assert "groups" not in data

    def test_add_rule(self):
        group = RuleGroup(name="g")
        group.add_rule(Rule(record="r", expr="up"))
        assert len(group.rules) == 1

    @pytest.mark.parametrize(
        "data",
        [None, {}, {"name": ""}, {"name": "g", "rules": {"a": 1}}, ["g"]],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises(RuleFormatError):
            RuleGroup.from_dict(data)

    def test_missing_rules_is_empty(self):
        assert RuleGroup.from_dict({"name": "g"}).rules == []

    @pytest.mark.parametrize("text", ["", b"", "# only a comment\n"])
    def test_from_yaml_rejects_empty_document(self, text):
        with pytest.raises(RuleFormatError):
            RuleGroup.from_yaml(text)


class TestRuleNamespace:
    def test_group_lookup(self, sample_group):
        ns = RuleNamespace(namespace="alerts", groups=[sample_group])
        assert ns.group("g1") is sample_group
        assert ns.group("missing") is None

    def test_to_dict(self, sample_group):
        ns = RuleNamespace(namespace="alerts", groups=[sample_group])
        assert ns.to_dict() == {"namespace": "alerts", "groups": [sample_group.to_dict()]}

    def test_parse_listing_falls_back_to_key(self):
        listing = parse_rule_namespaces("alerts:\n  groups:\n    - name: g1\n")
        assert listing["alerts"].namespace == "alerts"
        assert listing["alerts"].groups[0].name == "g1"

    def test_parse_listing_empty(self):
        assert parse_rule_namespaces("") == {}

    def test_parse_listing_rejects_non_mapping(self):
        with pytest.raises(RuleFormatError):
            parse_rule_namespaces("- a\n- b\n")


class TestRuleFiles:
    def test_dump_and_load(self, tmp_path, sample_group):
        other = RuleGroup(name="g2", rules=[Rule(record="r", expr="up")])
        path = tmp_path / "rules.yaml"
        path.write_text(dump_rule_groups([sample_group, other]))

        groups = load_rule_groups(path)

        assert [g.name for g in groups] == ["g1", "g2"]
        assert groups[0] == sample_group

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_rule_groups(path) == []

    def test_load_rejects_bad_groups(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("groups: nope\n")
        with pytest.raises(RuleFormatError):
            load_rule_groups(path)
