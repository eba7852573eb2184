"""Diff segment value object."""

from collections.abc import Iterable
from dataclasses import dataclass

from doccompare.domain.value_objects.segment_kind import SegmentKind


@dataclass(frozen=True)
class DiffSegment:
    """Contiguous run of equal, inserted or deleted text."""

    text: str
    kind: SegmentKind


def reconstruct_old(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the left-hand text from equal and delete segments."""
    return "".join(s.text for s in segments if s.kind != SegmentKind.INSERT)


def reconstruct_new(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the right-hand text from equal and insert segments."""
    return "".join(s.text for s in segments if s.kind != SegmentKind.DELETE)
