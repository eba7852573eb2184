"""Content extractor port - file bytes to plain text."""

from typing import Protocol

from doccompare.domain.value_objects import SourceKind


class ContentExtractor(Protocol):
    """Port for converting a file into plain text."""

    def classify(self, mime_type: str, file_name: str) -> SourceKind | None: ...

    def extract(self, data: bytes, mime_type: str, file_name: str) -> str: ...
