"""Selector normalization used when the selector engine rejects a selector.

The fallback strips pseudo-classes and pseudo-elements so the element part
of the selector can still be matched: ``.clearfix:after`` is kept as long as
some element matches ``.clearfix``.

Splitting on whitespace and truncating at ``:`` must both ignore quoted
text, otherwise ``a[href="javascript:"]`` and ``[class*=" icon-"]`` are torn
apart and rules in use would be removed.
"""

from __future__ import annotations

__all__ = ["normalize_selector", "split_compounds", "strip_pseudo"]


def split_compounds(selector: str) -> list[str]:
    """Split *selector* on whitespace that is not quoted, escaped, or bracketed.

    Whitespace inside ``(...)`` and ``[...]`` never splits, so
    ``li:nth-child(2n + 1)`` stays one compound.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote = ""
    depth = 0
    escaped = False
    for ch in selector:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]" and depth:
            depth -= 1
        elif ch.isspace() and not depth:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def strip_pseudo(token: str) -> str:
    """Return *token* up to its first unquoted, unescaped ``:``."""
    quote = ""
    escaped = False
    for i, ch in enumerate(token):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == ":":
            return token[:i]
    return token


def normalize_selector(selector: str) -> str:
    """Strip pseudo-classes and pseudo-elements from every compound of *selector*.

    A compound that is nothing but pseudos (``::selection``) becomes ``*``.

    >>> normalize_selector('a[href="javascript:"]:hover')
    'a[href="javascript:"]'
    >>> normalize_selector('a:hover > [class*=" icon-"]')
    'a > [class*=" icon-"]'
    """
    return " ".join(strip_pseudo(token) or "*" for token in split_compounds(selector))
