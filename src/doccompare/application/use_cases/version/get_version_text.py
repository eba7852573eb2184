"""Get version text use case."""

import asyncio

from doccompare.application.dto.comparison_dto import VersionTextOutput
from doccompare.application.ports import BlobStore, ContentExtractor, VersionStore
from doccompare.domain.exceptions import BlobNotFound, CrossParentComparison, VersionNotFound


class GetVersionTextUseCase:
    """Extract the plain text of one stored version (preview of what gets diffed)."""

    def __init__(
        self,
        version_store: VersionStore,
        blob_store: BlobStore,
        content_extractor: ContentExtractor,
    ) -> None:
        self._version_store = version_store
        self._blob_store = blob_store
        self._content_extractor = content_extractor

    async def execute(self, parent_id: str, version_id: str) -> VersionTextOutput:
        """Raises VersionNotFound, CrossParentComparison, BlobNotFound or ExtractionError."""
        version = await self._version_store.get_version(version_id)
        if version is None:
            raise VersionNotFound(None, version_id)
        if version.parent_id != parent_id:
            raise CrossParentComparison("Version does not belong to this template")

        data = await self._blob_store.get_bytes(version.file.storage_key)
        if data is None:
            raise BlobNotFound(version.file.storage_key)

        text = await asyncio.to_thread(
            self._content_extractor.extract,
            data,
            version.file.mime_type,
            version.file.original_name,
        )
        return VersionTextOutput(
            version_id=version.id,
            source_kind=self._content_extractor.classify(
                version.file.mime_type, version.file.original_name
            ),
            text=text,
        )
