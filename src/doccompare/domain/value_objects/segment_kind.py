"""Kind of a diff segment."""

from enum import StrEnum


class SegmentKind(StrEnum):
    """Whether a run of text is shared, added or removed."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
