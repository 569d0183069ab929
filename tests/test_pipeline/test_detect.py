"""Tests for the detect_unused_css entry point."""

import pytest

from uncss import ArgumentError, UncssOptions, detect_unused_css
from uncss.errors import RenderFailure
from uncss.render import StubRenderer


@pytest.fixture
def site(tmp_path):
    (tmp_path / "site.css").write_text(".used{color:red} .unused{color:blue}")
    page = str(tmp_path / "index.html")
    markup = '<link rel="stylesheet" href="site.css"><p class="used"></p>'
    return page, StubRenderer(pages={page: markup})


class TestDetectUnusedCss:
    def test_returns_css(self, site):
        page, stub = site
        assert detect_unused_css([page], renderer=stub) == ".used {\n  color:red\n}"

    def test_callback_receives_css(self, site):
        page, stub = site
        received = []
        css = detect_unused_css([page], None, received.append, renderer=stub)
        assert received == [css]

    def test_callback_in_options_position(self, site):
        page, stub = site
        received = []
        css = detect_unused_css([page], received.append, renderer=stub)
        assert received == [css]
        assert stub.calls == [(page, 1000)]

    def test_mapping_options(self, site):
        page, stub = site
        css = detect_unused_css([page], {"compress": True, "timeout": 10}, renderer=stub)
        assert css == ".used{color:red}"
        assert stub.calls == [(page, 10)]

    def test_options_object(self, site):
        page, stub = site
        css = detect_unused_css([page], UncssOptions(ignore=frozenset({".unused"})), renderer=stub)
        assert ".unused" in css

    def test_callback_not_called_on_failure(self, tmp_path):
        received = []
        stub = StubRenderer(failures={"bad.html": "boom"})
        with pytest.raises(RenderFailure):
            detect_unused_css(["bad.html"], None, received.append, renderer=stub)
        assert received == []


class TestArgumentErrors:
    def test_inputs_must_be_string_or_sequence(self):
        with pytest.raises(ArgumentError):
            detect_unused_css(123, renderer=StubRenderer())  # type: ignore[arg-type]

    def test_paths_must_be_strings(self):
        with pytest.raises(ArgumentError):
            detect_unused_css(["a.html", 7], renderer=StubRenderer())  # type: ignore[list-item]

    def test_bytes_rejected(self):
        with pytest.raises(ArgumentError):
            detect_unused_css(b"<p></p>", renderer=StubRenderer())  # type: ignore[arg-type]

    def test_options_of_wrong_type(self):
        with pytest.raises(ArgumentError):
            detect_unused_css("<p></p>", "compress")  # type: ignore[arg-type]

    def test_unknown_option(self):
        with pytest.raises(ArgumentError, match="Unknown option"):
            detect_unused_css("<p></p>", {"csspath": "x"})

    def test_callback_must_be_callable(self):
        with pytest.raises(ArgumentError):
            detect_unused_css("<p></p>", None, "not callable")  # type: ignore[arg-type]

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            detect_unused_css(123)  # type: ignore[arg-type]

    def test_renderer_untouched_on_bad_arguments(self):
        stub = StubRenderer()
        with pytest.raises(ArgumentError):
            detect_unused_css([1], renderer=stub)  # type: ignore[list-item]
        assert stub.calls == []
