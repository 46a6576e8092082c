"""Tests for the MCP tools and path configuration."""

import asyncio
import json

from pdf_freetext.core import paths
from pdf_freetext.tools.mcp_tools import (
    list_free_text_annotations,
    preview_free_text_appearance,
    show_accessible_directories,
)


class TestPaths:
    def test_configure_skips_missing(self, tmp_path):
        saved = list(paths.SEARCH_DIRECTORIES)
        try:
            accepted = paths.configure([str(tmp_path), str(tmp_path / "missing")])
            assert accepted == [str(tmp_path.resolve())]
        finally:
            paths.SEARCH_DIRECTORIES[:] = saved

    def test_outside_allowed_directory(self, allowed_dir, sample_pdf, tmp_path_factory):
        other = tmp_path_factory.mktemp("other") / "x.pdf"
        other.write_bytes(sample_pdf.read_bytes())
        assert paths.validate_and_resolve_path(str(other)) is None

    def test_find_by_name(self, allowed_dir, sample_pdf):
        assert paths.find_file("sample.pdf") == sample_pdf.resolve()

    def test_rejects_other_extensions(self, allowed_dir):
        txt = allowed_dir / "notes.txt"
        txt.write_text("x")
        assert paths.find_file("notes.txt") is None


class TestTools:
    def test_list(self, allowed_dir, sample_pdf):
        result = json.loads(asyncio.run(list_free_text_annotations("sample.pdf")))
        assert result["file_name"] == "sample.pdf"
        assert result["page_range"] == "all"
        assert result["total_annotations"] == 2

    def test_list_bad_range(self, allowed_dir, sample_pdf):
        text = asyncio.run(list_free_text_annotations("sample.pdf", "12"))
        assert text.startswith("Error:")

    def test_missing_file(self, allowed_dir):
        text = asyncio.run(list_free_text_annotations("nope.pdf"))
        assert text == "Error: Could not find file 'nope.pdf'."

    def test_preview(self, allowed_dir, sample_pdf):
        result = json.loads(asyncio.run(preview_free_text_appearance("sample.pdf", 2, 0)))
        assert result["bbox"] == [0.0, 0.0, 128.0, 40.0]
        assert "(Second note) Tj" in result["content"]

    def test_preview_wrong_index(self, allowed_dir, sample_pdf):
        text = asyncio.run(preview_free_text_appearance("sample.pdf", 1, 0))
        assert text.startswith("Error:")

    def test_show_accessible_directories(self, allowed_dir):
        info = json.loads(asyncio.run(show_accessible_directories()))
        assert info["accessible_directories"] == [str(allowed_dir.resolve())]
        assert info["allowed_extensions"] == [".pdf"]

    def test_preview_negative_page(self, allowed_dir, sample_pdf):
        text = asyncio.run(preview_free_text_appearance("sample.pdf", -1, 1))
        assert text.startswith("Error:")
