"""High-level entry point: detect_unused_css()."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from uncss.config import UncssOptions
from uncss.errors import ArgumentError
from uncss.events.bus import EventBus
from uncss.pipeline import Pipeline
from uncss.render import Renderer


def _coerce_options(options: UncssOptions | Mapping[str, Any] | None) -> UncssOptions:
    if options is None:
        return UncssOptions()
    if isinstance(options, UncssOptions):
        return options
    if isinstance(options, Mapping):
        return UncssOptions.from_mapping(options)
    raise ArgumentError(
        f"options must be UncssOptions, a mapping, or None, got {type(options).__name__}"
    )


def detect_unused_css(
    inputs: str | Sequence[str],
    options: UncssOptions | Mapping[str, Any] | Callable[[str], Any] | None = None,
    callback: Callable[[str], Any] | None = None,
    *,
    renderer: Renderer | None = None,
    event_bus: EventBus | None = None,
) -> str:
    """Return the CSS from *inputs*' stylesheets that some element actually uses.

    *inputs* is literal HTML or a sequence of HTML file paths.  When
    *callback* is given it receives the CSS text as well; it may also be
    passed in place of *options* (``detect_unused_css(files, print)``).
    Failures raise ``UncssError`` subclasses and never reach the callback.
    Bad arguments raise ``ArgumentError`` before any rendering starts.
    """
    if callback is None and callable(options):
        callback, options = options, None
    if callback is not None and not callable(callback):
        raise ArgumentError(f"callback must be callable, got {type(callback).__name__}")
    opts = _coerce_options(options)

    css = Pipeline(opts, renderer=renderer, event_bus=event_bus).run(inputs)
    if callback is not None:
        callback(css)
    return css
