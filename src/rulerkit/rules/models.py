"""Data models for Prometheus alerting and recording rule groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class RuleFormatError(ValueError):
    """Raised when a rule document does not have the Prometheus rule shape."""


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise RuleFormatError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def _string_map(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise RuleFormatError(f"'{key}' must be a mapping")
    return {str(k): str(v) for k, v in value.items()}


@dataclass
class Rule:
    """A single alerting or recording rule.

    Exactly one of ``record`` and ``alert`` is set. The expression is carried
    verbatim; it is not parsed or validated here.
    """

    expr: str
    record: str | None = None
    alert: str | None = None
    for_: str | None = None
    keep_firing_for: str | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    @property
    def is_alerting(self) -> bool:
        return self.alert is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to Prometheus rule format, omitting empty fields."""
        rule: dict[str, Any] = {}
        if self.record is not None:
            rule["record"] = self.record
        if self.alert is not None:
            rule["alert"] = self.alert
        rule["expr"] = self.expr
        if self.for_:
            rule["for"] = self.for_
        if self.keep_firing_for:
            rule["keep_firing_for"] = self.keep_firing_for
        if self.labels:
            rule["labels"] = dict(self.labels)
        if self.annotations:
            rule["annotations"] = dict(self.annotations)
        return rule

    @classmethod
    def from_dict(cls, data: Any) -> Rule:
        data = _require_mapping(data, "rule")

        record = data.get("record")
        alert = data.get("alert")
        if (record is None) == (alert is None):
            raise RuleFormatError("rule must set exactly one of 'record' or 'alert'")

        expr = data.get("expr")
        if expr is None or expr == "":
            raise RuleFormatError(f"rule '{record or alert}' is missing 'expr'")

        return cls(
            expr=str(expr),
            record=str(record) if record is not None else None,
            alert=str(alert) if alert is not None else None,
            for_=_optional_str(data.get("for")),
            keep_firing_for=_optional_str(data.get("keep_firing_for")),
            labels=_string_map(data, "labels"),
            annotations=_string_map(data, "annotations"),
        )


@dataclass
class RuleGroup:
    """A named set of rules evaluated together.

    Identity within a namespace is ``name``.
    """

    name: str
    rules: list[Rule] = field(default_factory=list)
    interval: str | None = None
    limit: int | None = None

    def add_rule(self, rule: Rule) -> None:
        self.rules.append(rule)

    def to_dict(self) -> dict[str, Any]:
        """Convert to Prometheus rule group format."""
        group: dict[str, Any] = {"name": self.name}
        if self.interval:
            group["interval"] = self.interval
        if self.limit:
            group["limit"] = self.limit
        group["rules"] = [rule.to_dict() for rule in self.rules]
        return group

    @classmethod
    def from_dict(cls, data: Any) -> RuleGroup:
        data = _require_mapping(data, "rule group")

        name = data.get("name")
        if not name:
            raise RuleFormatError("rule group is missing 'name'")

        raw_rules = data.get("rules") or []
        if not isinstance(raw_rules, list):
            raise RuleFormatError(f"'rules' of group '{name}' must be a list")

        limit = data.get("limit")
        return cls(
            name=str(name),
            rules=[Rule.from_dict(r) for r in raw_rules],
            interval=_optional_str(data.get("interval")),
            limit=int(limit) if limit is not None else None,
        )

    def to_yaml(self) -> str:
        """Serialize this single group, the body the ruler API expects on create."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str | bytes) -> RuleGroup:
        """Parse a single group document.

        An empty document is not a group and raises RuleFormatError.
        """
        return cls.from_dict(yaml.safe_load(text))


@dataclass
class RuleNamespace:
    """A tenant-scoped bucket of rule groups."""

    namespace: str
    groups: list[RuleGroup] = field(default_factory=list)

    def group(self, name: str) -> RuleGroup | None:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "groups": [g.to_dict() for g in self.groups],
        }

    @classmethod
    def from_dict(cls, data: Any, namespace: str | None = None) -> RuleNamespace:
        data = _require_mapping(data, "rule namespace")
        raw_groups = data.get("groups") or []
        if not isinstance(raw_groups, list):
            raise RuleFormatError("'groups' must be a list")
        return cls(
            namespace=str(data.get("namespace") or namespace or ""),
            groups=[RuleGroup.from_dict(g) for g in raw_groups],
        )


def parse_rule_namespaces(text: str | bytes) -> dict[str, RuleNamespace]:
    """Parse a ``{namespace: {namespace, groups}}`` document as listed by the ruler.

    An empty document yields an empty mapping.
    """
    data = yaml.safe_load(text)
    if data is None:
        return {}
    data = _require_mapping(data, "rule listing")
    return {
        str(name): RuleNamespace.from_dict(body, namespace=str(name))
        for name, body in data.items()
    }


def dump_rule_groups(groups: list[RuleGroup]) -> str:
    """Create a Prometheus rule file (``groups:`` document) for several groups."""
    data = {"groups": [group.to_dict() for group in groups]}
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def load_rule_groups(path: str | Path) -> list[RuleGroup]:
    """Load the groups of a Prometheus rule file from disk."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    data = _require_mapping(data, "rule file")
    raw_groups = data.get("groups") or []
    if not isinstance(raw_groups, list):
        raise RuleFormatError("'groups' must be a list")
    return [RuleGroup.from_dict(g) for g in raw_groups]
