"""uncss model layer -- public type re-exports."""

from uncss.model.stylesheet import GroupRule, OpaqueRule, Rule, SelectorRule, Stylesheet

__all__ = [
    "GroupRule",
    "OpaqueRule",
    "Rule",
    "SelectorRule",
    "Stylesheet",
]
