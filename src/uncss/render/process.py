"""Subprocess renderer: runs an external headless-browser script per page."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
import threading
import time
from pathlib import Path

from uncss.errors import RenderFailure

logger = logging.getLogger(__name__)

BROWSER_SCRIPT = str(Path(__file__).with_name("browser_script.py"))

# Extra time granted beyond the render timeout before the watchdog fires.
DEFAULT_GRACE_MS = 5_000

# How long a SIGTERM'd process group gets before SIGKILL.
_TERM_WAIT_S = 2.0


def _signal_group(proc: subprocess.Popen, sig: int) -> None:
    try:
        os.killpg(os.getpgid(proc.pid), sig)
    except (ProcessLookupError, PermissionError):
        pass


class SubprocessRenderer:
    """Renders pages by spawning ``<interpreter> <script> <path> <timeout_ms>``.

    The child writes markup to stdout and diagnostics to stderr.  A render
    succeeds only if the child exits 0 with nothing on stderr.  The timeout
    is passed to the child, which is expected to honour it; a watchdog
    kills the child's process group if it outlives ``timeout_ms + grace_ms``.

    Live children are tracked so ``terminate`` can stop siblings once one
    render has failed.
    """

    def __init__(
        self,
        interpreter: str | None = None,
        script: str = BROWSER_SCRIPT,
        grace_ms: int = DEFAULT_GRACE_MS,
    ) -> None:
        self._command = [interpreter or sys.executable, script]
        self._grace_ms = grace_ms
        self._lock = threading.Lock()
        self._live: set[subprocess.Popen] = set()

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def render(self, source_path: str, timeout_ms: int) -> str:
        args = [*self._command, source_path, str(timeout_ms)]
        watchdog_s = (timeout_ms + self._grace_ms) / 1000.0
        start = time.monotonic()

        proc = subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=True,
        )
        with self._lock:
            self._live.add(proc)

        try:
            stdout_bytes, stderr_bytes, timed_out = self._communicate(proc, watchdog_s)
        finally:
            with self._lock:
                self._live.discard(proc)

        duration = int((time.monotonic() - start) * 1000)
        if timed_out:
            logger.warning("Render of %s killed after %dms", source_path, duration)
            raise RenderFailure("timeout", source=source_path)

        markup = stdout_bytes.decode("utf-8", errors="replace") if stdout_bytes else ""
        error = stderr_bytes.decode("utf-8", errors="replace") if stderr_bytes else ""
        if proc.returncode == 0 and error == "":
            logger.debug("Rendered %s in %dms (%d chars)", source_path, duration, len(markup))
            return markup

        logger.debug("Render of %s failed with exit code %s", source_path, proc.returncode)
        raise RenderFailure(error or "non-zero exit", source=source_path)

    def terminate(self) -> None:
        """SIGTERM the process group of every live child."""
        with self._lock:
            live = list(self._live)
        for proc in live:
            logger.debug("Terminating render process %d", proc.pid)
            _signal_group(proc, signal.SIGTERM)

    @staticmethod
    def _communicate(proc: subprocess.Popen, watchdog_s: float) -> tuple[bytes, bytes, bool]:
        """Read stdout and stderr concurrently until exit or the watchdog fires."""
        try:
            stdout_bytes, stderr_bytes = proc.communicate(timeout=watchdog_s)
            return stdout_bytes, stderr_bytes, False
        except subprocess.TimeoutExpired:
            _signal_group(proc, signal.SIGTERM)
            try:
                stdout_bytes, stderr_bytes = proc.communicate(timeout=_TERM_WAIT_S)
            except subprocess.TimeoutExpired:
                _signal_group(proc, signal.SIGKILL)
                stdout_bytes, stderr_bytes = proc.communicate()
            return stdout_bytes, stderr_bytes, True
