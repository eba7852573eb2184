"""Unit tests for domain exceptions."""

import pytest

from doccompare.domain.exceptions import (
    BlobNotFound,
    CompareError,
    CrossParentComparison,
    DocCompareError,
    EnvironmentUnsupported,
    ExtractionError,
    MalformedContainer,
    MissingParameter,
    ParentNotFound,
    SameVersion,
    StorageUnavailable,
    UnsupportedFormat,
    VersionNotFound,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        MissingParameter,
        SameVersion,
        VersionNotFound,
        ParentNotFound,
        CrossParentComparison,
        StorageUnavailable,
        BlobNotFound,
    ],
)
def test_compare_errors_inherit_compare_error(exc_type) -> None:
    """Request-level failures are CompareError subclasses."""
    assert issubclass(exc_type, CompareError)
    assert issubclass(exc_type, DocCompareError)


@pytest.mark.parametrize("exc_type", [UnsupportedFormat, MalformedContainer, EnvironmentUnsupported])
def test_extraction_errors_are_separate(exc_type) -> None:
    """Extraction failures do not masquerade as request failures."""
    assert issubclass(exc_type, ExtractionError)
    assert not issubclass(exc_type, CompareError)


def test_default_messages() -> None:
    """Exceptions carry stable, user-facing default messages."""
    assert str(MissingParameter()) == "Both version1Id and version2Id are required"
    assert str(SameVersion()) == "Cannot compare a version with itself"
    assert str(CrossParentComparison()) == "Versions must belong to the same template"
    assert str(ParentNotFound("tpl-9")) == "Template not found"


def test_version_not_found_positions() -> None:
    """VersionNotFound names the position of the missing version."""
    assert str(VersionNotFound(1, "a")) == "Version 1 not found"
    assert str(VersionNotFound(2, "b")) == "Version 2 not found"
    assert str(VersionNotFound(None, "c")) == "Version not found"
    assert VersionNotFound(2, "b").version_id == "b"


def test_blob_not_found_keeps_key() -> None:
    """BlobNotFound exposes the storage key."""
    exc = BlobNotFound("v1/file.txt")
    assert exc.storage_key == "v1/file.txt"
    assert "v1/file.txt" in str(exc)


def test_unsupported_format_message() -> None:
    """UnsupportedFormat reports the MIME type or 'unknown'."""
    assert str(UnsupportedFormat("image/png")) == "Unsupported format: image/png"
    assert str(UnsupportedFormat("")) == "Unsupported format: unknown"


def test_exception_message_preserved() -> None:
    """Custom messages override defaults."""
    msg = "Version does not belong to this template"
    with pytest.raises(CompareError, match=msg):
        raise CrossParentComparison(msg)
