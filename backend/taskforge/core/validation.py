"""Validation Pipeline — rule-table validation of request bodies.

Invariants:
    - Fields checked in RuleSet declaration order, rules in list order
    - Global short-circuit: the first failing rule stops the whole scan
      (not just that field) and its message is the only one reported
    - The body is never modified
    - Absent fields are passed to predicates as None

Design Decisions:
    - Pure check returns message | None, raising variant wraps it
      (same split as the gate checks: pure core, exception at the edge)
    - RuleSet frozen at build time (MappingProxyType + tuples): rule tables
      are process-wide config, read-only after import
    - First-failure-only is kept on purpose; collecting all errors would
      change the client contract
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from taskforge.core.errors import RequestRuleError


@dataclass(frozen=True)
class ValidationRule:
    """Predicate + extra positional args + failure message."""
    fn: Callable[..., bool]
    message: str
    args: tuple[Any, ...] = ()


RuleSet = Mapping[str, tuple[ValidationRule, ...]]


def rule(fn: Callable[..., bool], message: str, *args: Any) -> ValidationRule:
    """Shorthand: rule(min_length, "Too short", 8)."""
    return ValidationRule(fn=fn, message=message, args=tuple(args))


def build_rule_set(rules: Mapping[str, Sequence[ValidationRule]]) -> RuleSet:
    """Freeze a field → rules mapping, keeping declaration order."""
    return MappingProxyType(
        {field: tuple(field_rules) for field, field_rules in rules.items()},
    )


def first_failure(rules: RuleSet, body: Mapping[str, Any]) -> str | None:
    """Return the message of the first failing rule, or None if all pass."""
    for field, field_rules in rules.items():
        value = body.get(field)
        for r in field_rules:
            if not r.fn(value, *r.args):
                return r.message
    return None


def check_rules(rules: RuleSet, body: Mapping[str, Any]) -> None:
    """Raise RequestRuleError with the first failing rule's message."""
    message = first_failure(rules, body)
    if message is not None:
        raise RequestRuleError(message)
