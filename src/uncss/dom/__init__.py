"""HTML document abstraction and the BeautifulSoup implementation."""

from uncss.dom.document import (
    INLINE_ORIGIN,
    Document,
    QueryResult,
    SoupDocument,
    Unsupported,
    parse_document,
)

__all__ = [
    "INLINE_ORIGIN",
    "Document",
    "QueryResult",
    "SoupDocument",
    "Unsupported",
    "parse_document",
]
