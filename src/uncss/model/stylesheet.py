"""Stylesheet model: SelectorRule, GroupRule, OpaqueRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SelectorRule:
    """A selector list paired with its declaration block.

    ``declarations`` is the serialized block body exactly as parsed; it is
    never inspected or rewritten.
    """

    selectors: tuple[str, ...]
    declarations: str

    @property
    def is_dead(self) -> bool:
        return not self.selectors


@dataclass(frozen=True)
class GroupRule:
    """A conditional-group at-rule (``@media``, ``@supports``...) wrapping rules."""

    keyword: str  # "media", "supports", ...
    condition: str  # "(min-width: 1px)", "screen and (color)", ...
    rules: tuple["Rule", ...]

    @property
    def is_dead(self) -> bool:
        return not self.rules


@dataclass(frozen=True)
class OpaqueRule:
    """Any other at-rule, kept verbatim (``@font-face``, ``@keyframes``, ``@import``)."""

    text: str

    @property
    def is_dead(self) -> bool:
        return False


Rule = Union[SelectorRule, GroupRule, OpaqueRule]


@dataclass(frozen=True)
class Stylesheet:
    """An ordered collection of rules parsed from one or more CSS sources."""

    rules: tuple[Rule, ...] = ()

    def selector_count(self) -> int:
        """Total number of selectors, counting those nested in group rules."""
        return sum(_selector_count(rule) for rule in self.rules)

    def rule_count(self) -> int:
        """Total number of selector rules, counting those nested in group rules."""
        return sum(_rule_count(rule) for rule in self.rules)


def _selector_count(rule: Rule) -> int:
    if isinstance(rule, SelectorRule):
        return len(rule.selectors)
    if isinstance(rule, GroupRule):
        return sum(_selector_count(inner) for inner in rule.rules)
    return 0


def _rule_count(rule: Rule) -> int:
    if isinstance(rule, SelectorRule):
        return 1
    if isinstance(rule, GroupRule):
        return sum(_rule_count(inner) for inner in rule.rules)
    return 0
