"""Registry: ordered (predicate, extractor) table; the first matching entry wins."""

from functools import partial

from doccompare.domain.exceptions import UnsupportedFormat
from doccompare.domain.value_objects import SourceKind
from doccompare.infrastructure.content_extraction.base import (
    ExtractorEntry,
    file_extension,
    normalize_mime,
    or_sentinel,
)
from doccompare.infrastructure.content_extraction.office_extractor import (
    DEFAULT_MAX_PART_BYTES,
    extract_docx_text,
    extract_pptx_text,
    extract_xlsx_text,
)
from doccompare.infrastructure.content_extraction.pdf_extractor import (
    PDF_MIME,
    extract_pdf_text,
)
from doccompare.infrastructure.content_extraction.text_extractor import (
    TEXT_EXTENSIONS,
    extract_plain_text,
    is_text_mime,
)


def _mime_or_extension(mime_marker: str, extensions: tuple[str, ...]):
    def matches(mime_type: str, file_name: str) -> bool:
        return mime_marker in normalize_mime(mime_type) or file_extension(file_name) in extensions

    return matches


def _is_text(mime_type: str, file_name: str) -> bool:
    return is_text_mime(mime_type) or file_extension(file_name) in TEXT_EXTENSIONS


def build_entries(max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> tuple[ExtractorEntry, ...]:
    """Dispatch table; max_part_bytes caps any decompressed Office part."""
    return (
        ExtractorEntry(
            name="text",
            matches=_is_text,
            extract=extract_plain_text,
            source_kind=SourceKind.TEXT,
        ),
        ExtractorEntry(
            name="pdf",
            matches=_mime_or_extension(PDF_MIME, ("pdf",)),
            extract=extract_pdf_text,
            source_kind=SourceKind.PDF,
        ),
        ExtractorEntry(
            name="docx",
            matches=_mime_or_extension("wordprocessingml", ("docx",)),
            extract=partial(extract_docx_text, max_part_bytes=max_part_bytes),
            source_kind=SourceKind.OFFICE,
        ),
        ExtractorEntry(
            name="xlsx",
            matches=_mime_or_extension("spreadsheetml", ("xlsx",)),
            extract=partial(extract_xlsx_text, max_part_bytes=max_part_bytes),
            source_kind=SourceKind.OFFICE,
        ),
        ExtractorEntry(
            name="pptx",
            matches=_mime_or_extension("presentationml", ("pptx",)),
            extract=partial(extract_pptx_text, max_part_bytes=max_part_bytes),
            source_kind=SourceKind.OFFICE,
        ),
    )


_ENTRIES = build_entries()


def find_extractor(
    mime_type: str | None,
    file_name: str | None,
    entries: tuple[ExtractorEntry, ...] = _ENTRIES,
) -> ExtractorEntry | None:
    """Return the first entry whose predicate accepts the file, or None."""
    for entry in entries:
        if entry.matches(mime_type or "", file_name or ""):
            return entry
    return None


def classify_source_kind(mime_type: str | None, file_name: str | None) -> SourceKind | None:
    """Source family of the file, or None for formats without an extractor."""
    entry = find_extractor(mime_type, file_name)
    return entry.source_kind if entry else None


def extract_text(
    data: bytes,
    mime_type: str | None,
    file_name: str | None,
    entries: tuple[ExtractorEntry, ...] = _ENTRIES,
) -> str:
    """
    Convert file bytes to plain text.
    Raises UnsupportedFormat, MalformedContainer or EnvironmentUnsupported.
    """
    entry = find_extractor(mime_type, file_name, entries)
    if entry is None:
        raise UnsupportedFormat(mime_type or "")
    return or_sentinel(entry.extract(data))


class RegistryContentExtractor:
    """ContentExtractor backed by the dispatch table."""

    def __init__(self, max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> None:
        self._entries = build_entries(max_part_bytes)

    def classify(self, mime_type: str, file_name: str) -> SourceKind | None:
        entry = find_extractor(mime_type, file_name, self._entries)
        return entry.source_kind if entry else None

    def extract(self, data: bytes, mime_type: str, file_name: str) -> str:
        return extract_text(data, mime_type, file_name, self._entries)
