"""Unit tests for content_extraction.registry."""

import io
import zipfile

import pytest

from doccompare.domain.exceptions import MalformedContainer, UnsupportedFormat
from doccompare.domain.value_objects import SourceKind
from doccompare.infrastructure.content_extraction import NO_TEXT_CONTENT
from doccompare.infrastructure.content_extraction.base import file_extension, normalize_mime
from doccompare.infrastructure.content_extraction.registry import (
    RegistryContentExtractor,
    classify_source_kind,
    extract_text,
    find_extractor,
)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


class TestHelpers:
    """Tests for normalize_mime and file_extension."""

    def test_normalize_mime_drops_parameters(self) -> None:
        assert normalize_mime("Text/Plain; charset=UTF-8") == "text/plain"

    def test_normalize_mime_empty(self) -> None:
        assert normalize_mime(None) == ""
        assert normalize_mime("") == ""

    def test_file_extension(self) -> None:
        assert file_extension("Contract.V2.DOCX") == "docx"
        assert file_extension("README") == ""
        assert file_extension(None) == ""


class TestFindExtractor:
    """Tests for find_extractor dispatch."""

    @pytest.mark.parametrize(
        ("mime", "name", "expected"),
        [
            ("text/plain", "a.bin", "text"),
            ("application/pdf", "", "pdf"),
            (DOCX_MIME, "", "docx"),
            (XLSX_MIME, "", "xlsx"),
            (PPTX_MIME, "", "pptx"),
            ("application/octet-stream", "notes.md", "text"),
            ("application/octet-stream", "scan.PDF", "pdf"),
            ("", "report.docx", "docx"),
            ("", "budget.xlsx", "xlsx"),
            ("", "deck.pptx", "pptx"),
        ],
    )
    def test_mime_or_extension_selects_entry(self, mime: str, name: str, expected: str) -> None:
        entry = find_extractor(mime, name)
        assert entry is not None
        assert entry.name == expected

    def test_first_match_wins(self) -> None:
        # A text MIME type takes precedence over a .pdf name.
        entry = find_extractor("text/plain", "odd.pdf")
        assert entry is not None
        assert entry.name == "text"

    @pytest.mark.parametrize(
        ("mime", "name"),
        [
            ("image/png", "logo.png"),
            ("application/octet-stream", "archive.zip"),
            (None, None),
            ("application/msword", "legacy.doc"),
        ],
    )
    def test_unknown_returns_none(self, mime: str | None, name: str | None) -> None:
        assert find_extractor(mime, name) is None


class TestClassifySourceKind:
    """Tests for classify_source_kind."""

    def test_families(self) -> None:
        assert classify_source_kind("text/csv", "a.csv") == SourceKind.TEXT
        assert classify_source_kind("application/pdf", "a.pdf") == SourceKind.PDF
        assert classify_source_kind(DOCX_MIME, "a.docx") == SourceKind.OFFICE
        assert classify_source_kind(XLSX_MIME, "a.xlsx") == SourceKind.OFFICE
        assert classify_source_kind(PPTX_MIME, "a.pptx") == SourceKind.OFFICE

    def test_unsupported_is_none(self) -> None:
        assert classify_source_kind("image/jpeg", "photo.jpg") is None


class TestExtractText:
    """Tests for extract_text."""

    def test_plain_text(self) -> None:
        assert extract_text(b"hello\n", "text/plain", "a.txt") == "hello\n"

    def test_whitespace_only_becomes_sentinel(self) -> None:
        assert extract_text(b"  \n\t\n", "text/plain", "a.txt") == NO_TEXT_CONTENT

    def test_empty_becomes_sentinel(self) -> None:
        assert extract_text(b"", "text/plain", "a.txt") == NO_TEXT_CONTENT

    def test_unsupported_raises(self) -> None:
        with pytest.raises(UnsupportedFormat, match="Unsupported format: image/png"):
            extract_text(b"\x89PNG", "image/png", "logo.png")

    def test_unsupported_without_mime_says_unknown(self) -> None:
        with pytest.raises(UnsupportedFormat, match="unknown"):
            extract_text(b"\x00", None, None)


class TestRegistryContentExtractor:
    """Tests for the ContentExtractor adapter."""

    def test_delegates(self) -> None:
        extractor = RegistryContentExtractor()
        assert extractor.classify("text/markdown", "a.md") == SourceKind.TEXT
        assert extractor.extract(b"# Title", "text/markdown", "a.md") == "# Title"

    def test_part_limit_applies_to_office_formats(self) -> None:
        xml = "<document><body><t>" + "x" * 200 + "</t></body></document>"
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as zf:
            zf.writestr("word/document.xml", xml)

        with pytest.raises(MalformedContainer, match="byte limit"):
            RegistryContentExtractor(max_part_bytes=50).extract(buf.getvalue(), DOCX_MIME, "a.docx")
        assert RegistryContentExtractor().extract(buf.getvalue(), DOCX_MIME, "a.docx") == "x" * 200
