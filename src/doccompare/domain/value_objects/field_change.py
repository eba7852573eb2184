"""Scalar field change and the scalar diff rule."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldChange:
    """Old/new pair for a scalar field whose value differs."""

    old: Any
    new: Any


def diff_scalar(old: Any, new: Any) -> FieldChange | None:
    """Return the old/new pair when values differ, None when equal."""
    if old == new:
        return None
    return FieldChange(old=old, new=new)
