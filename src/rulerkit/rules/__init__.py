"""
Prometheus rule-format models.

Rule groups and namespaces as exchanged with the Cortex/Mimir ruler API.
"""

from rulerkit.rules.models import (
    Rule,
    RuleFormatError,
    RuleGroup,
    RuleNamespace,
    dump_rule_groups,
    load_rule_groups,
    parse_rule_namespaces,
)

__all__ = [
    "Rule",
    "RuleFormatError",
    "RuleGroup",
    "RuleNamespace",
    "dump_rule_groups",
    "load_rule_groups",
    "parse_rule_namespaces",
]
