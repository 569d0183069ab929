"""Headless render script: prints the rendered markup of one HTML page.

Usage: python browser_script.py <source_path> <timeout_ms>

Loads the page in headless chromium, gives its scripts ``timeout_ms`` to
run, then writes the resulting DOM to stdout.  Any failure is reported on
stderr with a non-zero exit code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

USAGE = "usage: browser_script.py <source_path> <timeout_ms>"


def page_url(source_path: str) -> str:
    """Return a URL for *source_path*; URLs pass through unchanged."""
    if "://" in source_path:
        return source_path
    return Path(source_path).resolve().as_uri()


def render(source_path: str, timeout_ms: int) -> str:
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            page.goto(page_url(source_path), wait_until="load")
            page.wait_for_timeout(timeout_ms)
            return page.content()
        finally:
            browser.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 2
    try:
        timeout_ms = int(args[1])
    except ValueError:
        print(f"invalid timeout: {args[1]!r}", file=sys.stderr)
        return 2

    try:
        markup = render(args[0], timeout_ms)
    except PlaywrightError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    sys.stdout.write(markup)
    return 0


if __name__ == "__main__":
    sys.exit(main())
