"""Pytest fixtures for doccompare tests."""

from __future__ import annotations

import hashlib
from datetime import UTC, datetime

import pytest

from doccompare.application.dto.diff_config import DiffConfig
from doccompare.application.use_cases.version.compare_versions import CompareVersionsUseCase
from doccompare.application.use_cases.version.get_version_text import GetVersionTextUseCase
from doccompare.domain.entities import FileInfo, ParentDocument, VersionMetadata, VersionRecord
from doccompare.domain.exceptions import StorageUnavailable
from doccompare.domain.value_objects import VersionStatus
from doccompare.infrastructure.content_extraction import RegistryContentExtractor
from doccompare.infrastructure.diffing import MyersTextDiffer

PARENT_ID = "tpl-1"


# --- Fake stores ---


class FakeVersionStore:
    """In-memory version store."""

    def __init__(self) -> None:
        self._versions: dict[str, VersionRecord] = {}
        self._parents: dict[str, ParentDocument] = {}
        self.calls: list[str] = []
        self.unavailable = False

    def add_parent(self, parent: ParentDocument) -> None:
        self._parents[parent.id] = parent

    def add_version(self, version: VersionRecord) -> None:
        self._versions[version.id] = version

    async def get_version(self, version_id: str) -> VersionRecord | None:
        self.calls.append(version_id)
        if self.unavailable:
            raise StorageUnavailable("Version store is unavailable")
        return self._versions.get(version_id)

    async def get_parent(self, parent_id: str) -> ParentDocument | None:
        if self.unavailable:
            raise StorageUnavailable("Version store is unavailable")
        return self._parents.get(parent_id)


class FakeBlobStore:
    """In-memory blob store that records every key requested."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}
        self.calls: list[str] = []
        self.unavailable = False

    def put(self, storage_key: str, data: bytes) -> None:
        self._blobs[storage_key] = data

    async def get_bytes(self, storage_key: str) -> bytes | None:
        self.calls.append(storage_key)
        if self.unavailable:
            raise StorageUnavailable("Blob store is unavailable")
        return self._blobs.get(storage_key)


# --- Builders ---


def make_version(
    version_id: str,
    *,
    parent_id: str = PARENT_ID,
    version_number: int = 1,
    changes: str = "Initial",
    author: str = "Alice",
    status: VersionStatus = VersionStatus.DRAFT,
    original_name: str = "template.txt",
    mime_type: str = "text/plain",
    size_bytes: int = 100,
    checksum: str = "c1",
    storage_key: str | None = None,
) -> VersionRecord:
    """Version record with sensible defaults."""
    return VersionRecord(
        id=version_id,
        parent_id=parent_id,
        version_number=version_number,
        change_description=changes,
        file=FileInfo(
            original_name=original_name,
            mime_type=mime_type,
            size_bytes=size_bytes,
            checksum=checksum,
            storage_key=storage_key or f"{version_id}/{original_name}",
        ),
        metadata=VersionMetadata(
            author=author,
            status=status,
            created_at=datetime(2024, 1, version_number, tzinfo=UTC),
        ),
    )


def add_file_version(
    version_store: FakeVersionStore,
    blob_store: FakeBlobStore,
    version_id: str,
    data: bytes,
    **kwargs,
) -> VersionRecord:
    """Register a version whose checksum and size are derived from data, and store its bytes."""
    version = make_version(
        version_id,
        checksum=hashlib.md5(data).hexdigest(),
        size_bytes=len(data),
        **kwargs,
    )
    version_store.add_version(version)
    blob_store.put(version.file.storage_key, data)
    return version


# --- Fixtures ---


@pytest.fixture
def version_store() -> FakeVersionStore:
    """Version store holding the default parent document."""
    store = FakeVersionStore()
    store.add_parent(ParentDocument(id=PARENT_ID, name="Service Agreement"))
    return store


@pytest.fixture
def blob_store() -> FakeBlobStore:
    """Empty blob store."""
    return FakeBlobStore()


@pytest.fixture
def compare_versions(version_store: FakeVersionStore, blob_store: FakeBlobStore) -> CompareVersionsUseCase:
    """Comparator wired to the fakes and the real extractor and differ."""
    return CompareVersionsUseCase(
        version_store=version_store,
        blob_store=blob_store,
        content_extractor=RegistryContentExtractor(),
        text_differ=MyersTextDiffer(),
        diff_config=DiffConfig(max_edit_distance=1000, timeout_seconds=5.0),
        max_file_bytes=1024 * 1024,
    )


@pytest.fixture
def get_version_text(version_store: FakeVersionStore, blob_store: FakeBlobStore) -> GetVersionTextUseCase:
    """Text preview use case wired to the fakes."""
    return GetVersionTextUseCase(
        version_store=version_store,
        blob_store=blob_store,
        content_extractor=RegistryContentExtractor(),
    )
