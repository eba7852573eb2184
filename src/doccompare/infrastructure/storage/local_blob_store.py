"""Blob store backed by a local upload directory."""

import asyncio
import logging
from pathlib import Path

from doccompare.domain.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)


class LocalBlobStore:
    """Reads stored files from a directory; storage keys are paths relative to it."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    def _resolve(self, storage_key: str) -> Path | None:
        """Path for key, or None when the key would escape the root directory."""
        path = (self._root / storage_key).resolve()
        if not path.is_relative_to(self._root):
            logger.warning("Rejected storage key outside blob root: %s", storage_key)
            return None
        return path

    def _read(self, path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except IsADirectoryError:
            return None
        except OSError as e:
            logger.error("Blob store read failed for %s: %s", path, e)
            raise StorageUnavailable("Blob store is unavailable") from e

    async def get_bytes(self, storage_key: str) -> bytes | None:
        """Return file bytes, or None when no file is stored under the key."""
        if not storage_key:
            return None
        path = self._resolve(storage_key)
        if path is None:
            return None
        return await asyncio.to_thread(self._read, path)
