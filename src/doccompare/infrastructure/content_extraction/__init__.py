"""Content extraction: plain text from text, PDF and Office Open XML files."""

from doccompare.infrastructure.content_extraction.base import NO_TEXT_CONTENT
from doccompare.infrastructure.content_extraction.registry import (
    RegistryContentExtractor,
    classify_source_kind,
    extract_text,
)

__all__ = [
    "NO_TEXT_CONTENT",
    "RegistryContentExtractor",
    "classify_source_kind",
    "extract_text",
]
