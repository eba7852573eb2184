"""Diff configuration and result DTOs."""

from dataclasses import dataclass, field

from doccompare.domain.value_objects import DiffSegment

DEFAULT_MAX_EDIT_DISTANCE = 4000
DEFAULT_DIFF_TIMEOUT_SECONDS = 5.0


@dataclass
class DiffConfig:
    """Bounds for a single text diff.

    ``max_edit_distance`` caps the number of inserted plus deleted lines the
    aligner explores; ``timeout_seconds`` caps wall time. Exceeding either
    degrades the unmatched middle to one delete and one insert segment.
    Passing None removes a bound.
    """

    max_edit_distance: int | None = DEFAULT_MAX_EDIT_DISTANCE
    timeout_seconds: float | None = DEFAULT_DIFF_TIMEOUT_SECONDS


@dataclass
class TextDiff:
    """Segments of a text diff plus whether the bounded fallback was used."""

    segments: list[DiffSegment] = field(default_factory=list)
    truncated: bool = False
