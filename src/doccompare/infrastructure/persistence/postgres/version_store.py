"""PostgreSQL version store implementation."""

import logging

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from doccompare.domain.entities import FileInfo, ParentDocument, VersionMetadata, VersionRecord
from doccompare.domain.exceptions import StorageUnavailable
from doccompare.domain.value_objects import VersionStatus

logger = logging.getLogger(__name__)

_VERSION_COLUMNS = (
    "id, parent_id, version_number, change_description, "
    "original_name, mime_type, size_bytes, checksum, storage_key, "
    "author, status, created_at"
)


def _row_to_version(r: tuple) -> VersionRecord:
    return VersionRecord(
        id=r[0],
        parent_id=r[1],
        version_number=r[2],
        change_description=r[3] or "",
        file=FileInfo(
            original_name=r[4],
            mime_type=r[5],
            size_bytes=r[6],
            checksum=r[7],
            storage_key=r[8],
        ),
        metadata=VersionMetadata(
            author=r[9],
            status=VersionStatus(r[10]),
            created_at=r[11],
        ),
    )


class PostgresVersionStore:
    """Read-only version store over the document_version table."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def _fetchone(self, query: str, params: tuple) -> tuple | None:
        try:
            async with self._pool.connection() as conn:
                cur = await conn.execute(query, params)
                return await cur.fetchone()
        except (psycopg.OperationalError, PoolTimeout) as e:
            logger.error("Version store unavailable: %s", e)
            raise StorageUnavailable("Version store is unavailable") from e

    async def get_version(self, version_id: str) -> VersionRecord | None:
        """Get version by id."""
        r = await self._fetchone(
            f"SELECT {_VERSION_COLUMNS} FROM document_version WHERE id = %s",
            (version_id,),
        )
        if not r:
            return None
        return _row_to_version(r)

    async def get_parent(self, parent_id: str) -> ParentDocument | None:
        """Get parent document by id."""
        r = await self._fetchone(
            "SELECT id, name FROM parent_document WHERE id = %s AND deleted_at IS NULL",
            (parent_id,),
        )
        if not r:
            return None
        return ParentDocument(id=r[0], name=r[1])
