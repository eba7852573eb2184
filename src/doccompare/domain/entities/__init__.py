"""Domain entities."""

from doccompare.domain.entities.parent_document import ParentDocument
from doccompare.domain.entities.version import FileInfo, VersionMetadata, VersionRecord

__all__ = [
    "FileInfo",
    "ParentDocument",
    "VersionMetadata",
    "VersionRecord",
]
