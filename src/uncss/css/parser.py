"""CSS parser adapter: turns tinycss2 output into the uncss rule model.

Selector rules become ``SelectorRule`` with one string per comma-separated
selector.  Conditional-group at-rules become ``GroupRule`` with their block
parsed recursively.  Every other at-rule is kept verbatim as ``OpaqueRule``.

Selector text is sliced from the source rather than re-serialized from
tokens, so ignore lists match exactly what the stylesheet author wrote.
"""

from __future__ import annotations

import tinycss2

from uncss.errors import ParseFailure
from uncss.model.stylesheet import GroupRule, OpaqueRule, Rule, SelectorRule, Stylesheet

__all__ = ["CONDITIONAL_GROUP_KEYWORDS", "parse_css", "split_selector_list"]

# At-rules whose block holds ordinary rules that apply under a condition.
CONDITIONAL_GROUP_KEYWORDS = frozenset(
    {"media", "supports", "container", "layer", "document", "-moz-document"}
)

_OPENERS = {"(": ")", "[": "]"}


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Raises ParseFailure when tinycss2 reports a syntax error at rule level
    or inside a selector.
    """
    # Same newline preprocessing tinycss2 applies, so token positions line up.
    text = (
        source.replace("\0", "\ufffd")
        .replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\f", "\n")
    )
    nodes = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
    return Stylesheet(rules=_Converter(text).rules(nodes))


class _Converter:
    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    def rules(self, nodes: list) -> tuple[Rule, ...]:
        rules: list[Rule] = []
        for node in nodes:
            if node.type == "error":
                raise _parse_failure(node)
            if node.type == "qualified-rule":
                rules.append(self._selector_rule(node))
            elif node.type == "at-rule":
                rules.append(self._at_rule(node))
        return tuple(rules)

    def _selector_rule(self, node) -> SelectorRule:
        for token in node.prelude:
            if token.type == "error":
                raise _parse_failure(token)
        start = self._line_starts[node.source_line - 1] + node.source_column - 1
        return SelectorRule(
            selectors=split_selector_list(_prelude_at(self._text, start)),
            declarations=tinycss2.serialize(node.content).strip(),
        )

    def _at_rule(self, node) -> Rule:
        keyword = node.lower_at_keyword
        if keyword in CONDITIONAL_GROUP_KEYWORDS and node.content is not None:
            inner = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
            return GroupRule(
                keyword=keyword,
                condition=tinycss2.serialize(node.prelude).strip(),
                rules=self.rules(inner),
            )
        return OpaqueRule(text=tinycss2.serialize([node]).strip())


def _prelude_at(text: str, start: int) -> str:
    """Return the source text from *start* up to the ``{`` opening the block.

    Comments are dropped; everything else is kept as written.
    """
    out: list[str] = []
    quote = ""
    depth = 0
    i = start
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            out.append(text[i : i + 2])
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = ""
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end == -1 else end + 2
            continue
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]" and depth:
            depth -= 1
        elif ch == "{" and not depth:
            break
        out.append(ch)
        i += 1
    return "".join(out)


def split_selector_list(prelude: str) -> tuple[str, ...]:
    """Split *prelude* on top-level commas and strip each selector.

    Commas inside quotes, brackets, or parentheses (``:is(a, b)``) do not
    split.
    """
    selectors: list[str] = []
    current: list[str] = []
    quote = ""
    closers: list[str] = []
    escaped = False
    for ch in prelude:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            selectors.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    selectors.append("".join(current).strip())
    return tuple(s for s in selectors if s)


def _parse_failure(node) -> ParseFailure:
    return ParseFailure(
        f"CSS parse error at {node.source_line}:{node.source_column}: {node.message}",
        line=node.source_line,
        column=node.source_column,
    )
