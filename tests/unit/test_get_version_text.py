"""Unit tests for GetVersionTextUseCase."""

import pytest

from doccompare.domain.exceptions import (
    BlobNotFound,
    CrossParentComparison,
    StorageUnavailable,
    UnsupportedFormat,
    VersionNotFound,
)
from doccompare.domain.value_objects import SourceKind
from doccompare.infrastructure.content_extraction import NO_TEXT_CONTENT

from tests.conftest import PARENT_ID, add_file_version, make_version


@pytest.mark.asyncio
async def test_returns_extracted_text(get_version_text, version_store, blob_store) -> None:
    """Text versions come back verbatim with their source kind."""
    add_file_version(version_store, blob_store, "v1", b"Clause 1\nClause 2\n")

    result = await get_version_text.execute(PARENT_ID, "v1")

    assert result.version_id == "v1"
    assert result.source_kind == SourceKind.TEXT
    assert result.text == "Clause 1\nClause 2\n"


@pytest.mark.asyncio
async def test_empty_file_returns_sentinel(get_version_text, version_store, blob_store) -> None:
    """Whitespace-only content maps to the sentinel."""
    add_file_version(version_store, blob_store, "v1", b"   \n")

    result = await get_version_text.execute(PARENT_ID, "v1")

    assert result.text == NO_TEXT_CONTENT


@pytest.mark.asyncio
async def test_unknown_version(get_version_text) -> None:
    """Missing version raises VersionNotFound without a position."""
    with pytest.raises(VersionNotFound, match="^Version not found$") as exc_info:
        await get_version_text.execute(PARENT_ID, "missing")
    assert exc_info.value.which is None
    assert exc_info.value.version_id == "missing"


@pytest.mark.asyncio
async def test_version_of_other_parent(get_version_text, version_store) -> None:
    """Versions are only served under their own parent."""
    version_store.add_version(make_version("v1", parent_id="tpl-2"))

    with pytest.raises(CrossParentComparison, match="does not belong"):
        await get_version_text.execute(PARENT_ID, "v1")


@pytest.mark.asyncio
async def test_missing_blob(get_version_text, version_store) -> None:
    """A record without stored bytes raises BlobNotFound."""
    version_store.add_version(make_version("v1", storage_key="v1/gone.txt"))

    with pytest.raises(BlobNotFound, match="v1/gone.txt"):
        await get_version_text.execute(PARENT_ID, "v1")


@pytest.mark.asyncio
async def test_unsupported_format(get_version_text, version_store, blob_store) -> None:
    """Formats without an extractor raise UnsupportedFormat."""
    add_file_version(
        version_store, blob_store, "v1", b"\x89PNG", original_name="logo.png", mime_type="image/png"
    )

    with pytest.raises(UnsupportedFormat):
        await get_version_text.execute(PARENT_ID, "v1")


@pytest.mark.asyncio
async def test_blob_store_unavailable(get_version_text, version_store, blob_store) -> None:
    """Storage failures propagate."""
    add_file_version(version_store, blob_store, "v1", b"x")
    blob_store.unavailable = True

    with pytest.raises(StorageUnavailable):
        await get_version_text.execute(PARENT_ID, "v1")
