"""Blob store port."""

from typing import Protocol


class BlobStore(Protocol):
    """Port for fetching stored file bytes by key."""

    async def get_bytes(self, storage_key: str) -> bytes | None: ...
