"""Domain value objects."""

from doccompare.domain.value_objects.diff_segment import (
    DiffSegment,
    reconstruct_new,
    reconstruct_old,
)
from doccompare.domain.value_objects.field_change import FieldChange, diff_scalar
from doccompare.domain.value_objects.segment_kind import SegmentKind
from doccompare.domain.value_objects.source_kind import SourceKind
from doccompare.domain.value_objects.version_status import VersionStatus

__all__ = [
    "DiffSegment",
    "FieldChange",
    "SegmentKind",
    "SourceKind",
    "VersionStatus",
    "diff_scalar",
    "reconstruct_new",
    "reconstruct_old",
]
