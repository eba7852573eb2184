"""Extractor for plain text formats."""

from doccompare.infrastructure.content_extraction.base import normalize_mime

TEXT_EXTENSIONS = (
    "txt",
    "md",
    "csv",
    "tsv",
    "log",
    "json",
    "xml",
    "html",
    "htm",
    "yaml",
    "yml",
)

# application/* types that are text in practice
_TEXT_APPLICATION_TYPES = frozenset(
    {
        "application/json",
        "application/xml",
        "application/x-yaml",
        "application/yaml",
    }
)


def is_text_mime(mime_type: str) -> bool:
    """True for text/* and the text-like application types."""
    mime = normalize_mime(mime_type)
    return mime.startswith("text/") or mime in _TEXT_APPLICATION_TYPES


def extract_plain_text(data: bytes) -> str:
    """Decode bytes as UTF-8 (invalid sequences replaced) and return as-is."""
    return data.decode("utf-8", errors="replace")
