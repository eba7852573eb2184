"""Document version entity."""

from dataclasses import dataclass
from datetime import datetime

from doccompare.domain.value_objects import VersionStatus


@dataclass(frozen=True)
class FileInfo:
    """Stored file attributes of a version."""

    original_name: str
    mime_type: str
    size_bytes: int
    checksum: str
    storage_key: str


@dataclass(frozen=True)
class VersionMetadata:
    """Authoring metadata of a version."""

    author: str
    status: VersionStatus
    created_at: datetime


@dataclass(frozen=True)
class VersionRecord:
    """Immutable snapshot of a document at a point in time."""

    id: str
    parent_id: str
    version_number: int
    change_description: str
    file: FileInfo
    metadata: VersionMetadata

    def __post_init__(self) -> None:
        if self.version_number < 1:
            raise ValueError("version_number must be a positive integer")
