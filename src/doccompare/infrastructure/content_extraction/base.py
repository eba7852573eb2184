"""Shared pieces for content extractors."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from doccompare.domain.value_objects import SourceKind

NO_TEXT_CONTENT = "No text content found"

Extractor = Callable[[bytes], str]
Predicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class ExtractorEntry:
    """One row of the dispatch table: when it applies, what runs, which family it is."""

    name: str
    matches: Predicate
    extract: Extractor
    source_kind: SourceKind


def normalize_mime(mime_type: str | None) -> str:
    """Lowercase MIME type without parameters (e.g. charset)."""
    if not mime_type:
        return ""
    return mime_type.split(";")[0].strip().lower()


def file_extension(file_name: str | None) -> str:
    """Lowercase extension without the dot, or empty string."""
    if not file_name:
        return ""
    return Path(file_name).suffix.lstrip(".").lower()


def or_sentinel(text: str) -> str:
    """Replace whitespace-only output with the stable empty-content sentinel."""
    return text if text.strip() else NO_TEXT_CONTENT
