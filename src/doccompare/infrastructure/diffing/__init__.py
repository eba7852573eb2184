"""Text diffing."""

from doccompare.infrastructure.diffing.myers_differ import (
    MyersTextDiffer,
    diff_text,
    diff_text_detailed,
    split_lines,
)

__all__ = ["MyersTextDiffer", "diff_text", "diff_text_detailed", "split_lines"]
