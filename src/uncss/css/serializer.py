"""Serialize the uncss rule model back to CSS text."""

from __future__ import annotations

from uncss.model.stylesheet import GroupRule, OpaqueRule, Rule, SelectorRule, Stylesheet

__all__ = ["serialize_stylesheet"]

INDENT = "  "


def serialize_stylesheet(stylesheet: Stylesheet) -> str:
    """Render *stylesheet* as CSS text, one blank line between top-level rules.

    An empty stylesheet serializes to the empty string.
    """
    return "\n\n".join(_serialize_rule(rule, "") for rule in stylesheet.rules)


def _serialize_rule(rule: Rule, indent: str) -> str:
    if isinstance(rule, SelectorRule):
        selectors = (",\n" + indent).join(rule.selectors)
        return f"{indent}{selectors} {_block(rule.declarations, indent)}"
    if isinstance(rule, GroupRule):
        inner = "\n\n".join(_serialize_rule(r, indent + INDENT) for r in rule.rules)
        head = f"@{rule.keyword} {rule.condition}" if rule.condition else f"@{rule.keyword}"
        return f"{indent}{head} {{\n{inner}\n{indent}}}"
    if isinstance(rule, OpaqueRule):
        return indent + rule.text
    raise TypeError(f"Unknown rule type: {type(rule).__name__}")


def _block(body: str, indent: str) -> str:
    lines = [line.strip() for line in body.splitlines() if line.strip()]
    if not lines:
        return "{}"
    inner_indent = indent + INDENT
    joined = ("\n" + inner_indent).join(lines)
    return f"{{\n{inner_indent}{joined}\n{indent}}}"
