"""Version store port."""

from typing import Protocol

from doccompare.domain.entities import ParentDocument, VersionRecord


class VersionStore(Protocol):
    """Port for read access to stored versions.

    Implementations return None for unknown ids and raise
    StorageUnavailable when the backing store cannot be reached.
    """

    async def get_version(self, version_id: str) -> VersionRecord | None: ...

    async def get_parent(self, parent_id: str) -> ParentDocument | None: ...
