"""Remove rules whose selectors match no element in any document."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from uncss.dom import Document, Unsupported
from uncss.filter.normalize import normalize_selector
from uncss.model.stylesheet import GroupRule, Rule, SelectorRule, Stylesheet

logger = logging.getLogger(__name__)


def match_count(document: Document, selector: str) -> int:
    """Count elements of *document* matching *selector*.

    When the engine cannot evaluate the selector it is retried in its
    normalized form.  A selector unsupported in both forms counts as zero.
    """
    result = document.query(selector)
    if isinstance(result, Unsupported):
        normalized = normalize_selector(selector)
        logger.debug("Retrying %r as %r (%s)", selector, normalized, result.reason)
        result = document.query(normalized)
        if isinstance(result, Unsupported):
            logger.debug("Selector %r cannot be evaluated: %s", selector, result.reason)
            return 0
    return result


def is_selector_used(
    documents: Sequence[Document],
    selector: str,
    ignore: frozenset[str] = frozenset(),
) -> bool:
    """True if *selector* must be kept.

    At-rule selectors and ignored selectors are always kept; otherwise the
    first document with a match decides and the rest are not queried.
    """
    if selector.startswith("@"):
        return True
    if selector in ignore:
        return True
    for document in documents:
        if match_count(document, selector):
            return True
    logger.debug("Unused selector: %s", selector)
    return False


def filter_rules(
    documents: Sequence[Document],
    rules: Iterable[Rule],
    ignore: frozenset[str] = frozenset(),
) -> tuple[Rule, ...]:
    """Filter *rules* recursively, dropping rules left with nothing in them."""
    kept: list[Rule] = []
    for rule in rules:
        if isinstance(rule, GroupRule):
            rule = replace(rule, rules=filter_rules(documents, rule.rules, ignore))
        elif isinstance(rule, SelectorRule):
            used = tuple(s for s in rule.selectors if is_selector_used(documents, s, ignore))
            rule = replace(rule, selectors=used)
        if not rule.is_dead:
            kept.append(rule)
    return tuple(kept)


def filter_stylesheet(
    documents: Sequence[Document],
    stylesheet: Stylesheet,
    ignore: Iterable[str] = (),
) -> Stylesheet:
    """Return a new Stylesheet holding only the rules used by *documents*."""
    return Stylesheet(rules=filter_rules(documents, stylesheet.rules, frozenset(ignore)))
