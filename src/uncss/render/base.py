"""Renderer protocol: turns a source file into the markup a browser would see."""

from __future__ import annotations

from typing import Protocol


class Renderer(Protocol):
    """Protocol for document acquisition.

    ``render`` returns the page markup or raises ``RenderFailure``.
    ``terminate`` stops any work still in flight; it is called when a
    sibling render has failed and must be safe to call at any time.
    """

    def render(self, source_path: str, timeout_ms: int) -> str: ...

    def terminate(self) -> None: ...
