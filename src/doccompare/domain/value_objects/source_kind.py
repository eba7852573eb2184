"""Family of file formats text can be extracted from."""

from enum import StrEnum


class SourceKind(StrEnum):
    """Text source classification used by the content extractor."""

    TEXT = "text"
    OFFICE = "office"
    PDF = "pdf"
