"""Version comparison API resources."""

import logging

import falcon.asgi

from doccompare.application.dto.comparison_dto import (
    ComparisonResult,
    ContentDiff,
    VersionSnapshot,
    VersionTextOutput,
)
from doccompare.application.use_cases.version.compare_versions import CompareVersionsUseCase
from doccompare.application.use_cases.version.get_version_text import GetVersionTextUseCase
from doccompare.domain.exceptions import (
    BlobNotFound,
    CompareError,
    CrossParentComparison,
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
from doccompare.domain.value_objects import FieldChange

logger = logging.getLogger(__name__)

# exception type -> HTTP status; first isinstance match wins
_ERROR_STATUS: tuple[tuple[type[Exception], str], ...] = (
    (MissingParameter, falcon.HTTP_400),
    (SameVersion, falcon.HTTP_400),
    (CrossParentComparison, falcon.HTTP_400),
    (VersionNotFound, falcon.HTTP_404),
    (ParentNotFound, falcon.HTTP_404),
    (BlobNotFound, falcon.HTTP_404),
    (StorageUnavailable, falcon.HTTP_503),
    (UnsupportedFormat, falcon.HTTP_415),
    (MalformedContainer, falcon.HTTP_422),
    (EnvironmentUnsupported, falcon.HTTP_422),
)

# internal field name -> JSON key
_FIELD_KEYS = {
    "version_number": "versionNumber",
    "changes": "changes",
    "author": "author",
    "status": "status",
    "original_name": "originalName",
    "mime_type": "mimeType",
    "size_bytes": "sizeBytes",
}


def _set_error(resp: falcon.asgi.Response, ex: Exception) -> None:
    for exc_type, status in _ERROR_STATUS:
        if isinstance(ex, exc_type):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    if isinstance(ex, StorageUnavailable):
        logger.error("Storage failure during request: %s", ex)
    resp.media = {"error": str(ex)}


def _snapshot_to_dict(s: VersionSnapshot) -> dict:
    return {
        "id": s.id,
        "versionNumber": s.version_number,
        "changes": s.change_description,
        "author": s.author,
        "status": s.status,
        "createdAt": s.created_at.isoformat(),
        "file": {
            "originalName": s.original_name,
            "mimeType": s.mime_type,
            "sizeBytes": s.size_bytes,
            "checksum": s.checksum,
        },
    }


def _changes_to_dict(changes: dict[str, FieldChange]) -> dict:
    return {
        _FIELD_KEYS.get(name, name): {"old": c.old, "new": c.new}
        for name, c in changes.items()
    }


def _content_diff_to_dict(c: ContentDiff) -> dict:
    return {
        "contentChanged": c.content_changed,
        "isTextRepresentable": c.is_text_representable,
        "sourceKind": str(c.source_kind) if c.source_kind else None,
        "segments": (
            [{"text": s.text, "kind": str(s.kind)} for s in c.segments]
            if c.segments is not None
            else None
        ),
        "error": c.error,
        "truncated": c.truncated,
    }


def comparison_to_dict(r: ComparisonResult) -> dict:
    """JSON body for a comparison result."""
    summary = r.summary
    return {
        "parentId": r.parent_id,
        "parentName": r.parent_name,
        "versionA": _snapshot_to_dict(r.version_a),
        "versionB": _snapshot_to_dict(r.version_b),
        "metadataDiff": _changes_to_dict(r.metadata_diff),
        "fileMetadataDiff": _changes_to_dict(r.file_metadata_diff),
        "contentDiff": _content_diff_to_dict(r.content_diff),
        "summary": {
            "hasAnyChange": summary.has_any_change,
            "metadataChangeCount": summary.metadata_change_count,
            "fileMetadataChangeCount": summary.file_metadata_change_count,
            "contentChanged": summary.content_changed,
            "totalChangeCount": summary.total_change_count,
        }
        if summary
        else None,
    }


def _text_to_dict(t: VersionTextOutput) -> dict:
    return {
        "versionId": t.version_id,
        "sourceKind": str(t.source_kind) if t.source_kind else None,
        "text": t.text,
    }


class VersionComparisonResource:
    """GET /v1/documents/{parent_id}/versions/compare[/{a}/{b}] - compare two versions."""

    def __init__(self, compare_versions: CompareVersionsUseCase) -> None:
        self._compare_versions = compare_versions

    async def _respond(
        self,
        resp: falcon.asgi.Response,
        parent_id: str,
        version_a_id: str | None,
        version_b_id: str | None,
    ) -> None:
        try:
            result = await self._compare_versions.execute(parent_id, version_a_id, version_b_id)
        except CompareError as e:
            _set_error(resp, e)
            return
        resp.media = comparison_to_dict(result)
        resp.status = falcon.HTTP_200

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        parent_id: str,
        version_a_id: str,
        version_b_id: str,
    ) -> None:
        """Compare versions given as path segments."""
        await self._respond(resp, parent_id, version_a_id, version_b_id)

    async def on_get_query(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        parent_id: str,
    ) -> None:
        """Compare versions given as version1Id / version2Id query parameters."""
        await self._respond(
            resp,
            parent_id,
            req.get_param("version1Id"),
            req.get_param("version2Id"),
        )


class VersionTextResource:
    """GET /v1/documents/{parent_id}/versions/{version_id}/text - extracted text of one version."""

    def __init__(self, get_version_text: GetVersionTextUseCase) -> None:
        self._get_version_text = get_version_text

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        parent_id: str,
        version_id: str,
    ) -> None:
        """Return extracted text."""
        try:
            result = await self._get_version_text.execute(parent_id, version_id)
        except (CompareError, ExtractionError) as e:
            _set_error(resp, e)
            return
        resp.media = _text_to_dict(result)
        resp.status = falcon.HTTP_200
