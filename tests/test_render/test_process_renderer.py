"""Tests for SubprocessRenderer using small Python scripts as the child."""

import textwrap
import threading
import time

import pytest

from uncss.errors import RenderFailure
from uncss.render import BROWSER_SCRIPT, SubprocessRenderer


def write_script(tmp_path, body: str) -> str:
    script = tmp_path / "child.py"
    script.write_text(textwrap.dedent(body))
    return str(script)


class TestSubprocessRenderer:
    def test_returns_stdout(self, tmp_path):
        script = write_script(
            tmp_path,
            """
            import sys
            sys.stdout.write("<p>%s %s</p>" % (sys.argv[1], sys.argv[2]))
            """,
        )
        renderer = SubprocessRenderer(script=script)
        assert renderer.render("page.html", 250) == "<p>page.html 250</p>"

    def test_default_script_is_browser_script(self):
        assert SubprocessRenderer().command[-1] == BROWSER_SCRIPT

    def test_stderr_output_fails_even_with_zero_exit(self, tmp_path):
        script = write_script(
            tmp_path,
            """
            import sys
            sys.stdout.write("<p></p>")
            sys.stderr.write("ReferenceError: foo is not defined")
            """,
        )
        with pytest.raises(RenderFailure) as exc_info:
            SubprocessRenderer(script=script).render("page.html", 100)
        assert exc_info.value.diagnostic == "ReferenceError: foo is not defined"
        assert exc_info.value.source == "page.html"

    def test_nonzero_exit_without_stderr(self, tmp_path):
        script = write_script(
            tmp_path,
            """
            import sys
            sys.exit(3)
            """,
        )
        with pytest.raises(RenderFailure) as exc_info:
            SubprocessRenderer(script=script).render("page.html", 100)
        assert exc_info.value.diagnostic == "non-zero exit"

    def test_watchdog_kills_hung_child(self, tmp_path):
        script = write_script(
            tmp_path,
            """
            import time
            time.sleep(30)
            """,
        )
        renderer = SubprocessRenderer(script=script, grace_ms=100)
        start = time.monotonic()
        with pytest.raises(RenderFailure) as exc_info:
            renderer.render("page.html", 0)
        assert exc_info.value.diagnostic == "timeout"
        assert time.monotonic() - start < 10


class TestTerminate:
    def test_no_live_children(self):
        SubprocessRenderer().terminate()

    def test_stops_running_child(self, tmp_path):
        marker = tmp_path / "started"
        script = write_script(
            tmp_path,
            f"""
            import pathlib, time
            pathlib.Path({str(marker)!r}).write_text("1")
            time.sleep(30)
            """,
        )
        renderer = SubprocessRenderer(script=script)
        errors: list[Exception] = []

        def run():
            try:
                renderer.render("page.html", 60_000)
            except RenderFailure as exc:
                errors.append(exc)

        worker = threading.Thread(target=run)
        worker.start()
        deadline = time.monotonic() + 10
        while not marker.exists() and time.monotonic() < deadline:
            time.sleep(0.05)

        renderer.terminate()
        worker.join(timeout=10)

        assert not worker.is_alive()
        assert len(errors) == 1
        assert errors[0].diagnostic == "non-zero exit"
