"""Stylesheet discovery, path resolution, and loading.

Stylesheets are found through ``<link rel="stylesheet">`` elements, resolved
against the directory of the document that links them, flattened across
documents, and deduplicated.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from uncss.dom import Document
from uncss.errors import UncssError
from uncss.events import EventBus, StylesheetSkipped

logger = logging.getLogger(__name__)

STYLESHEET_LINK_SELECTOR = 'link[rel="stylesheet"]'


@dataclass(frozen=True)
class LoadedStylesheets:
    """Contents of the stylesheets that exist, plus the paths that did not."""

    paths: tuple[str, ...]
    texts: tuple[str, ...]
    skipped: tuple[str, ...] = ()

    def joined(self) -> str:
        return "\n".join(self.texts)


def extract_stylesheets(document: Document) -> list[str]:
    """Return the href of every stylesheet link in *document*, in order."""
    return document.attribute_values(STYLESHEET_LINK_SELECTOR, "href")


def resolve_href(href: str, source_path: str | None) -> str:
    """Resolve *href* against the directory of *source_path*.

    Literal markup (``source_path`` is None) resolves against the current
    working directory.  A leading ``/`` does not make the href absolute, and
    query strings and fragments are dropped.
    """
    for marker in ("?", "#"):
        href = href.split(marker, 1)[0]
    base = os.path.dirname(source_path) if source_path else ""
    return os.path.normpath(os.path.join(base, href.lstrip("/")))


def dedupe_keep_last(paths: Sequence[str]) -> list[str]:
    """Drop duplicates, keeping each path at the position of its last occurrence."""
    last_index = {path: i for i, path in enumerate(paths)}
    return [path for i, path in enumerate(paths) if last_index[path] == i]


def resolve_stylesheets(
    documents: Sequence[Document],
    source_paths: Sequence[str | None],
    explicit: Sequence[str] | None = None,
) -> list[str]:
    """Return the ordered, deduplicated stylesheet paths for *documents*.

    An explicit list is returned unchanged.  If the first document links no
    stylesheet the result is empty, whatever the other documents link.
    """
    if explicit is not None:
        return list(explicit)

    per_document = [extract_stylesheets(doc) for doc in documents]
    if not per_document or not per_document[0]:
        return []

    resolved: list[str] = []
    for document, hrefs, source in zip(documents, per_document, source_paths):
        for href in hrefs:
            if not href.strip():
                logger.warning("Ignoring stylesheet link with empty href in %s", document.origin)
                continue
            resolved.append(resolve_href(href.strip(), source))
    return dedupe_keep_last(resolved)


def read_stylesheets(
    paths: Sequence[str],
    *,
    max_workers: int = 8,
    event_bus: EventBus | None = None,
) -> LoadedStylesheets:
    """Read every existing stylesheet concurrently, preserving *paths* order.

    Paths that do not name a file are skipped with a warning and a
    ``StylesheetSkipped`` event.
    """
    existing: list[str] = []
    skipped: list[str] = []
    for path in paths:
        if os.path.isfile(path):
            existing.append(path)
            continue
        logger.warning("Stylesheet not found, skipping: %s", path)
        skipped.append(path)
        if event_bus is not None:
            event_bus.emit(StylesheetSkipped(path=path))

    if not existing:
        return LoadedStylesheets(paths=(), texts=(), skipped=tuple(skipped))

    with ThreadPoolExecutor(max_workers=min(max_workers, len(existing))) as pool:
        texts = list(pool.map(_read_text, existing))
    return LoadedStylesheets(paths=tuple(existing), texts=tuple(texts), skipped=tuple(skipped))


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise UncssError(f"Cannot read stylesheet {path}: {exc}", cause=exc)
