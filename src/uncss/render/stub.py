"""Stub renderer for testing."""

from __future__ import annotations

import threading

from uncss.errors import RenderFailure


class StubRenderer:
    """Test stub that serves canned markup per source path.

    Paths listed in *failures* raise ``RenderFailure`` with the given
    diagnostic.  Unknown paths fail with ``"no such page"``.
    """

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        failures: dict[str, str] | None = None,
    ) -> None:
        self._pages: dict[str, str] = dict(pages) if pages else {}
        self._failures: dict[str, str] = dict(failures) if failures else {}
        self._lock = threading.Lock()
        self._calls: list[tuple[str, int]] = []
        self._terminations = 0

    def render(self, source_path: str, timeout_ms: int) -> str:
        with self._lock:
            self._calls.append((source_path, timeout_ms))
        if source_path in self._failures:
            raise RenderFailure(self._failures[source_path], source=source_path)
        if source_path not in self._pages:
            raise RenderFailure("no such page", source=source_path)
        return self._pages[source_path]

    def terminate(self) -> None:
        with self._lock:
            self._terminations += 1

    # --- Test helpers ---

    @property
    def calls(self) -> list[tuple[str, int]]:
        """All (source_path, timeout_ms) pairs passed to render."""
        with self._lock:
            return list(self._calls)

    @property
    def terminations(self) -> int:
        with self._lock:
            return self._terminations
