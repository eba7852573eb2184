"""Application entry point and composition root."""

import logging

from doccompare import __version__
from doccompare.application.dto.diff_config import DiffConfig
from doccompare.application.use_cases.version.compare_versions import CompareVersionsUseCase
from doccompare.application.use_cases.version.get_version_text import GetVersionTextUseCase
from doccompare.config import Settings, get_settings
from doccompare.infrastructure.content_extraction import RegistryContentExtractor
from doccompare.infrastructure.diffing import MyersTextDiffer
from doccompare.infrastructure.persistence.postgres.connection import create_pool
from doccompare.infrastructure.persistence.postgres.version_store import PostgresVersionStore
from doccompare.infrastructure.storage.local_blob_store import LocalBlobStore
from doccompare.interfaces.api.app import create_app
from doccompare.interfaces.api.middleware.cors import CORSMiddleware
from doccompare.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from doccompare.interfaces.api.resources.health import HealthResource
from doccompare.interfaces.api.resources.versions import (
    VersionComparisonResource,
    VersionTextResource,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_doccompare_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    pool = create_pool(settings.database_url, max_size=settings.database_pool_max_size)

    version_store = PostgresVersionStore(pool)
    blob_store = LocalBlobStore(settings.blob_storage_path)
    content_extractor = RegistryContentExtractor(max_part_bytes=settings.max_office_part_bytes)

    compare_versions = CompareVersionsUseCase(
        version_store=version_store,
        blob_store=blob_store,
        content_extractor=content_extractor,
        text_differ=MyersTextDiffer(),
        diff_config=DiffConfig(
            max_edit_distance=settings.diff_max_edit_distance,
            timeout_seconds=settings.diff_timeout_seconds,
        ),
        max_file_bytes=settings.max_compare_file_bytes,
    )
    get_version_text = GetVersionTextUseCase(
        version_store=version_store,
        blob_store=blob_store,
        content_extractor=content_extractor,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        comparison_resource=VersionComparisonResource(compare_versions),
        text_resource=VersionTextResource(get_version_text),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
        ],
    )


def main() -> None:
    """CLI entry point - run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level)
    logger.info("doccompare v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(
        create_doccompare_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=log_level.lower(),
    )
