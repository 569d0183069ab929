"""Tests for the static and stub renderers and the renderer factory."""

import pytest

from uncss.errors import ArgumentError, RenderFailure
from uncss.render import StaticRenderer, StubRenderer, SubprocessRenderer, create_renderer


class TestStaticRenderer:
    def test_reads_file(self, tmp_path):
        page = tmp_path / "index.html"
        page.write_text("<p class='a'></p>", encoding="utf-8")
        assert StaticRenderer().render(str(page), 1000) == "<p class='a'></p>"

    def test_missing_file(self, tmp_path):
        missing = str(tmp_path / "missing.html")
        with pytest.raises(RenderFailure) as exc_info:
            StaticRenderer().render(missing, 1000)
        assert exc_info.value.source == missing
        assert isinstance(exc_info.value.cause, OSError)


class TestStubRenderer:
    def test_serves_pages_and_records_calls(self):
        stub = StubRenderer(pages={"a.html": "<p></p>"})
        assert stub.render("a.html", 500) == "<p></p>"
        assert stub.calls == [("a.html", 500)]

    def test_configured_failure(self):
        stub = StubRenderer(failures={"bad.html": "boom"})
        with pytest.raises(RenderFailure, match="boom"):
            stub.render("bad.html", 0)

    def test_unknown_page(self):
        with pytest.raises(RenderFailure, match="no such page"):
            StubRenderer().render("nowhere.html", 0)

    def test_counts_terminations(self):
        stub = StubRenderer()
        stub.terminate()
        stub.terminate()
        assert stub.terminations == 2


class TestCreateRenderer:
    def test_browser(self):
        assert isinstance(create_renderer("browser"), SubprocessRenderer)

    def test_static(self):
        assert isinstance(create_renderer("static"), StaticRenderer)

    def test_unknown(self):
        with pytest.raises(ArgumentError, match="Unknown renderer"):
            create_renderer("phantom")
