"""Minifier adapter around cssmin."""

from __future__ import annotations

import cssmin


def minify_css(css: str) -> str:
    """Return a minified copy of *css*; blank input stays empty."""
    if not css.strip():
        return ""
    return cssmin.cssmin(css).strip()
