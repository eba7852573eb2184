"""Text differ port - line-level diff of two texts."""

from typing import Protocol

from doccompare.application.dto.diff_config import DiffConfig, TextDiff


class TextDiffer(Protocol):
    """Port for computing equal/insert/delete segments between two texts."""

    def diff(self, old: str, new: str, config: DiffConfig) -> TextDiff: ...
