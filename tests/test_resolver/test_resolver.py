"""Tests for stylesheet discovery, resolution, and loading."""

import os

import pytest

from uncss.dom import parse_document
from uncss.errors import UncssError
from uncss.events import EventBus, StylesheetSkipped
from uncss.resolver import (
    dedupe_keep_last,
    extract_stylesheets,
    read_stylesheets,
    resolve_href,
    resolve_stylesheets,
)


def page(*hrefs: str) -> str:
    links = "".join(f'<link rel="stylesheet" href="{href}">' for href in hrefs)
    return f"<html><head>{links}</head><body></body></html>"


# ---------------------------------------------------------------------------
# resolve_href
# ---------------------------------------------------------------------------


class TestResolveHref:
    def test_relative_to_document_directory(self):
        assert resolve_href("css/site.css", "site/index.html") == os.path.join("site", "css", "site.css")

    def test_leading_slash_is_relative(self):
        assert resolve_href("/css/site.css", "site/index.html") == os.path.join("site", "css", "site.css")

    def test_parent_segments_are_normalized(self):
        assert resolve_href("../shared/a.css", "site/pages/about.html") == os.path.join("site", "shared", "a.css")

    def test_query_and_fragment_are_dropped(self):
        assert resolve_href("a.css?v=3#top", "index.html") == "a.css"

    def test_inline_markup_resolves_against_cwd(self):
        assert resolve_href("./a.css", None) == "a.css"


class TestDedupeKeepLast:
    def test_keeps_last_occurrence(self):
        assert dedupe_keep_last(["a", "b", "a", "c"]) == ["b", "a", "c"]

    def test_no_duplicates(self):
        assert dedupe_keep_last(["a", "b"]) == ["a", "b"]

    def test_empty(self):
        assert dedupe_keep_last([]) == []


# ---------------------------------------------------------------------------
# resolve_stylesheets
# ---------------------------------------------------------------------------


class TestResolveStylesheets:
    def test_extracts_in_document_order(self):
        doc = parse_document(page("a.css", "b.css"))
        assert extract_stylesheets(doc) == ["a.css", "b.css"]

    def test_flattens_across_documents(self):
        docs = [parse_document(page("a.css")), parse_document(page("b.css"))]
        result = resolve_stylesheets(docs, ["x/one.html", "y/two.html"])
        assert result == [os.path.join("x", "a.css"), os.path.join("y", "b.css")]

    def test_shared_stylesheet_keeps_last_position(self):
        docs = [parse_document(page("main.css", "one.css")), parse_document(page("main.css"))]
        assert resolve_stylesheets(docs, ["one.html", "two.html"]) == ["one.css", "main.css"]

    def test_first_document_without_links_short_circuits(self):
        docs = [parse_document("<p></p>"), parse_document(page("b.css"))]
        assert resolve_stylesheets(docs, ["one.html", "two.html"]) == []

    def test_explicit_list_is_used_verbatim(self):
        docs = [parse_document(page("a.css"))]
        explicit = ["z.css", "/abs/y.css", "z.css"]
        assert resolve_stylesheets(docs, ["index.html"], explicit) == explicit

    def test_empty_href_is_skipped(self):
        docs = [parse_document(page("", "a.css"))]
        assert resolve_stylesheets(docs, ["index.html"]) == ["a.css"]

    def test_no_documents(self):
        assert resolve_stylesheets([], []) == []


# ---------------------------------------------------------------------------
# read_stylesheets
# ---------------------------------------------------------------------------


class TestReadStylesheets:
    def test_reads_in_path_order(self, tmp_path):
        paths = []
        for name, body in [("b.css", ".b{}"), ("a.css", ".a{}"), ("c.css", ".c{}")]:
            (tmp_path / name).write_text(body)
            paths.append(str(tmp_path / name))
        loaded = read_stylesheets(paths, max_workers=2)
        assert loaded.texts == (".b{}", ".a{}", ".c{}")
        assert loaded.joined() == ".b{}\n.a{}\n.c{}"
        assert loaded.skipped == ()

    def test_missing_files_are_skipped_with_event(self, tmp_path):
        (tmp_path / "a.css").write_text(".a{}")
        missing = str(tmp_path / "missing.css")
        bus = EventBus()
        seen = []
        bus.subscribe(StylesheetSkipped, seen.append)

        loaded = read_stylesheets([missing, str(tmp_path / "a.css")], event_bus=bus)

        assert loaded.paths == (str(tmp_path / "a.css"),)
        assert loaded.skipped == (missing,)
        assert seen == [StylesheetSkipped(path=missing)]

    def test_nothing_to_read(self):
        loaded = read_stylesheets([])
        assert loaded.texts == ()
        assert loaded.joined() == ""

    def test_unreadable_file_raises(self, tmp_path, monkeypatch):
        target = tmp_path / "a.css"
        target.write_text(".a{}")

        def explode(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("pathlib.Path.read_text", explode)
        with pytest.raises(UncssError, match="Cannot read stylesheet"):
            read_stylesheets([str(target)])
