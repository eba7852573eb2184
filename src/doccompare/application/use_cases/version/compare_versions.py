"""Compare versions use case."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from doccompare.application.dto.comparison_dto import (
    ComparisonResult,
    ComparisonSummary,
    ContentDiff,
    VersionSnapshot,
)
from doccompare.application.dto.diff_config import DiffConfig
from doccompare.application.ports import BlobStore, ContentExtractor, TextDiffer, VersionStore
from doccompare.domain.entities import VersionRecord
from doccompare.domain.exceptions import (
    CrossParentComparison,
    EnvironmentUnsupported,
    MalformedContainer,
    MissingParameter,
    ParentNotFound,
    SameVersion,
    UnsupportedFormat,
    VersionNotFound,
)
from doccompare.domain.value_objects import FieldChange, SourceKind, diff_scalar

logger = logging.getLogger(__name__)

METADATA_FIELDS: tuple[tuple[str, Callable[[VersionRecord], Any]], ...] = (
    ("version_number", lambda v: v.version_number),
    ("changes", lambda v: v.change_description),
    ("author", lambda v: v.metadata.author),
    ("status", lambda v: str(v.metadata.status)),
)

FILE_METADATA_FIELDS: tuple[tuple[str, Callable[[VersionRecord], Any]], ...] = (
    ("original_name", lambda v: v.file.original_name),
    ("mime_type", lambda v: v.file.mime_type),
    ("size_bytes", lambda v: v.file.size_bytes),
)


def diff_fields(
    fields: tuple[tuple[str, Callable[[VersionRecord], Any]], ...],
    old: VersionRecord,
    new: VersionRecord,
) -> dict[str, FieldChange]:
    """Run diff_scalar over each field, keeping only the ones that changed."""
    result: dict[str, FieldChange] = {}
    for name, getter in fields:
        change = diff_scalar(getter(old), getter(new))
        if change is not None:
            result[name] = change
    return result


def summarize(
    metadata_diff: dict[str, FieldChange],
    file_metadata_diff: dict[str, FieldChange],
    content_diff: ContentDiff,
) -> ComparisonSummary:
    """Counts over all diffs; content counts as one change."""
    total = len(metadata_diff) + len(file_metadata_diff) + (1 if content_diff.content_changed else 0)
    return ComparisonSummary(
        has_any_change=total > 0,
        metadata_change_count=len(metadata_diff),
        file_metadata_change_count=len(file_metadata_diff),
        content_changed=content_diff.content_changed,
        total_change_count=total,
    )


class CompareVersionsUseCase:
    """Compute the structured difference between two versions of a parent document."""

    def __init__(
        self,
        version_store: VersionStore,
        blob_store: BlobStore,
        content_extractor: ContentExtractor,
        text_differ: TextDiffer,
        diff_config: DiffConfig | None = None,
        max_file_bytes: int | None = None,
    ) -> None:
        self._version_store = version_store
        self._blob_store = blob_store
        self._content_extractor = content_extractor
        self._text_differ = text_differ
        self._diff_config = diff_config or DiffConfig()
        self._max_file_bytes = max_file_bytes

    async def execute(
        self,
        parent_id: str,
        version_a_id: str | None,
        version_b_id: str | None,
    ) -> ComparisonResult:
        """Compare version A (old) with version B (new)."""
        if not version_a_id or not version_b_id:
            raise MissingParameter()
        if version_a_id == version_b_id:
            raise SameVersion()

        version_a, version_b = await asyncio.gather(
            self._version_store.get_version(version_a_id),
            self._version_store.get_version(version_b_id),
        )
        if version_a is None:
            raise VersionNotFound(1, version_a_id)
        if version_b is None:
            raise VersionNotFound(2, version_b_id)
        if version_a.parent_id != parent_id or version_b.parent_id != parent_id:
            raise CrossParentComparison()

        parent = await self._version_store.get_parent(parent_id)
        if parent is None:
            raise ParentNotFound(parent_id)

        metadata_diff = diff_fields(METADATA_FIELDS, version_a, version_b)
        file_metadata_diff = diff_fields(FILE_METADATA_FIELDS, version_a, version_b)
        content_diff = await self._compare_content(version_a, version_b)

        return ComparisonResult(
            parent_id=parent.id,
            parent_name=parent.name,
            version_a=VersionSnapshot.from_record(version_a),
            version_b=VersionSnapshot.from_record(version_b),
            metadata_diff=metadata_diff,
            file_metadata_diff=file_metadata_diff,
            content_diff=content_diff,
            summary=summarize(metadata_diff, file_metadata_diff, content_diff),
        )

    def _classify(self, version_a: VersionRecord, version_b: VersionRecord) -> SourceKind | None:
        return self._content_extractor.classify(
            version_b.file.mime_type, version_b.file.original_name
        ) or self._content_extractor.classify(version_a.file.mime_type, version_a.file.original_name)

    async def _compare_content(
        self, version_a: VersionRecord, version_b: VersionRecord
    ) -> ContentDiff:
        """Diff extracted text; extraction problems degrade into the result."""
        source_kind = self._classify(version_a, version_b)
        # Equal checksums mean equal bytes, so nothing is fetched or extracted.
        if version_a.file.checksum == version_b.file.checksum:
            return ContentDiff(
                content_changed=False,
                is_text_representable=source_kind is not None,
                source_kind=source_kind,
            )

        if self._max_file_bytes is not None and max(
            version_a.file.size_bytes, version_b.file.size_bytes
        ) > self._max_file_bytes:
            return ContentDiff(
                content_changed=True,
                is_text_representable=source_kind is not None,
                source_kind=source_kind,
                error=f"File exceeds {self._max_file_bytes} bytes; content comparison skipped",
            )

        data_a, data_b = await asyncio.gather(
            self._blob_store.get_bytes(version_a.file.storage_key),
            self._blob_store.get_bytes(version_b.file.storage_key),
        )
        for which, version, data in ((1, version_a, data_a), (2, version_b, data_b)):
            if data is None:
                logger.warning(
                    "File %s of version %s missing from blob store",
                    version.file.storage_key,
                    version.id,
                )
                return ContentDiff(
                    content_changed=True,
                    is_text_representable=source_kind is not None,
                    source_kind=source_kind,
                    error=f"File of version {which} not found in storage",
                )

        try:
            text_a, text_b = await asyncio.gather(
                asyncio.to_thread(
                    self._content_extractor.extract,
                    data_a,
                    version_a.file.mime_type,
                    version_a.file.original_name,
                ),
                asyncio.to_thread(
                    self._content_extractor.extract,
                    data_b,
                    version_b.file.mime_type,
                    version_b.file.original_name,
                ),
            )
        except UnsupportedFormat as e:
            logger.info("Binary content differs by checksum only: %s", e)
            return ContentDiff(
                content_changed=True,
                is_text_representable=False,
                source_kind=source_kind,
            )
        except (EnvironmentUnsupported, MalformedContainer) as e:
            logger.warning(
                "Content extraction failed for versions %s/%s: %s",
                version_a.id,
                version_b.id,
                e,
            )
            return ContentDiff(
                content_changed=True,
                source_kind=source_kind,
                error=str(e),
            )

        text_diff = await asyncio.to_thread(
            self._text_differ.diff, text_a, text_b, self._diff_config
        )
        return ContentDiff(
            content_changed=True,
            source_kind=source_kind,
            segments=text_diff.segments,
            truncated=text_diff.truncated,
        )
