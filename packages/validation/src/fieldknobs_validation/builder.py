"""Flat rule-list construction from optional and nested parts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .rules import ValidationRule

RuleComponent = Union[ValidationRule, Iterable["RuleComponent"], None]


def collect_rules(*components: RuleComponent) -> list[ValidationRule]:
    """Flatten rule components into a single list, keeping declaration order.

    ``None`` entries are dropped and iterables are expanded in place, so
    optional rules and rules generated in a loop can be listed inline:

        collect_rules(
            NonAsciiRule(),
            NonEmptyRule(priority=2) if required else None,
            [LengthRule(n) for n in lengths],
        )

    Raises:
        TypeError: If a component is neither a rule, an iterable nor None
    """
    rules: list[ValidationRule] = []
    for component in components:
        if component is None:
            continue
        if isinstance(component, ValidationRule):
            rules.append(component)
        elif isinstance(component, Iterable) and not isinstance(component, (str, bytes)):
            rules.extend(collect_rules(*component))
        else:
            raise TypeError(f"Cannot collect {type(component).__name__} as a rule")
    return rules
