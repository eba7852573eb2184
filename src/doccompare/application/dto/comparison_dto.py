"""Comparison DTOs."""

from dataclasses import dataclass, field
from datetime import datetime

from doccompare.domain.entities import VersionRecord
from doccompare.domain.value_objects import DiffSegment, FieldChange, SourceKind


@dataclass
class VersionSnapshot:
    """Denormalized view of one compared version."""

    id: str
    version_number: int
    change_description: str
    author: str
    status: str
    created_at: datetime
    original_name: str
    mime_type: str
    size_bytes: int
    checksum: str

    @classmethod
    def from_record(cls, record: VersionRecord) -> "VersionSnapshot":
        return cls(
            id=record.id,
            version_number=record.version_number,
            change_description=record.change_description,
            author=record.metadata.author,
            status=str(record.metadata.status),
            created_at=record.metadata.created_at,
            original_name=record.file.original_name,
            mime_type=record.file.mime_type,
            size_bytes=record.file.size_bytes,
            checksum=record.file.checksum,
        )


@dataclass
class ContentDiff:
    """Outcome of comparing the two files' contents."""

    content_changed: bool
    is_text_representable: bool = True
    source_kind: SourceKind | None = None
    segments: list[DiffSegment] | None = None
    error: str | None = None
    truncated: bool = False


@dataclass
class ComparisonSummary:
    """Aggregate counts over all diffs."""

    has_any_change: bool
    metadata_change_count: int
    file_metadata_change_count: int
    content_changed: bool
    total_change_count: int


@dataclass
class ComparisonResult:
    """Structured difference between two versions of one parent document."""

    parent_id: str
    parent_name: str
    version_a: VersionSnapshot
    version_b: VersionSnapshot
    metadata_diff: dict[str, FieldChange] = field(default_factory=dict)
    file_metadata_diff: dict[str, FieldChange] = field(default_factory=dict)
    content_diff: ContentDiff = field(default_factory=lambda: ContentDiff(content_changed=False))
    summary: ComparisonSummary | None = None


@dataclass
class VersionTextOutput:
    """Extracted text of one version."""

    version_id: str
    source_kind: SourceKind | None
    text: str
