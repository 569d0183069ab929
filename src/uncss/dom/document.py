"""Queryable HTML documents backed by BeautifulSoup and soupsieve."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, Union

import soupsieve
from bs4 import BeautifulSoup

# Origin recorded for documents built from literal markup rather than a file.
INLINE_ORIGIN = "<string>"

# Pseudo-classes that depend on user interaction or navigation state.
# soupsieve accepts them but they never match a static tree, so they are
# reported as unsupported instead of as zero matches.
STATEFUL_PSEUDO_CLASSES = frozenset(
    {
        "active",
        "current",
        "focus",
        "focus-visible",
        "focus-within",
        "future",
        "hover",
        "local-link",
        "past",
        "paused",
        "playing",
        "target",
        "target-within",
        "user-invalid",
        "visited",
    }
)

_QUOTED_RE = re.compile(r"\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'")
_PSEUDO_CLASS_RE = re.compile(r"(?<![:\\]):(?!:)([a-zA-Z-]+)")


@dataclass(frozen=True)
class Unsupported:
    """Outcome of a query the selector engine cannot evaluate."""

    selector: str
    reason: str = ""


QueryResult = Union[int, Unsupported]


class Document(Protocol):
    """A parsed HTML page that answers selector queries."""

    @property
    def origin(self) -> str: ...

    def query(self, selector: str) -> QueryResult: ...

    def attribute_values(self, selector: str, name: str) -> list[str]: ...


class SoupDocument:
    """Document implementation over a BeautifulSoup tree."""

    def __init__(self, markup: str, origin: str = INLINE_ORIGIN, features: str = "html.parser") -> None:
        self._origin = origin
        self._soup = BeautifulSoup(markup, features)

    @property
    def origin(self) -> str:
        return self._origin

    def query(self, selector: str) -> QueryResult:
        """Return the number of elements matching *selector*, or Unsupported."""
        stateful = _stateful_pseudo_class(selector)
        if stateful:
            return Unsupported(selector, f"state-dependent pseudo-class :{stateful}")
        try:
            return len(self._soup.select(selector))
        except (soupsieve.SelectorSyntaxError, NotImplementedError) as exc:
            # soupsieve raises NotImplementedError for pseudo-elements.
            return Unsupported(selector, str(exc))

    def attribute_values(self, selector: str, name: str) -> list[str]:
        """Return *name* attribute values of matching elements, in document order.

        Elements without the attribute are skipped.
        """
        values: list[str] = []
        for element in self._soup.select(selector):
            value = element.get(name)
            if value is None:
                continue
            if isinstance(value, list):
                value = " ".join(value)
            values.append(value)
        return values

    def __repr__(self) -> str:
        return f"SoupDocument(origin={self._origin!r})"


def parse_document(markup: str, origin: str = INLINE_ORIGIN) -> SoupDocument:
    """Parse raw HTML markup into a queryable document."""
    return SoupDocument(markup, origin=origin)


def _stateful_pseudo_class(selector: str) -> str:
    """Return the first state-dependent pseudo-class named in *selector*, or ''."""
    unquoted = _QUOTED_RE.sub('""', selector)
    for match in _PSEUDO_CLASS_RE.finditer(unquoted):
        name = match.group(1).lower()
        if name in STATEFUL_PSEUDO_CLASSES:
            return name
    return ""
