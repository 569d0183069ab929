"""Static renderer: reads HTML straight from disk, no script execution."""

from __future__ import annotations

from pathlib import Path

from uncss.errors import RenderFailure


class StaticRenderer:
    """Returns a file's contents as-is. The timeout is ignored."""

    def render(self, source_path: str, timeout_ms: int) -> str:
        try:
            return Path(source_path).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise RenderFailure(f"Cannot read {source_path}: {exc}", source=source_path, cause=exc)

    def terminate(self) -> None:
        pass
