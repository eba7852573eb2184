"""Parent document entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParentDocument:
    """Logical document owning an ordered sequence of versions."""

    id: str
    name: str
