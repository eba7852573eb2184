"""Application ports - interfaces for external adapters."""

from doccompare.application.ports.blob_store import BlobStore
from doccompare.application.ports.content_extractor import ContentExtractor
from doccompare.application.ports.text_differ import TextDiffer
from doccompare.application.ports.version_store import VersionStore

__all__ = [
    "BlobStore",
    "ContentExtractor",
    "TextDiffer",
    "VersionStore",
]
