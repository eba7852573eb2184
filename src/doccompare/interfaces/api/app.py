"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from doccompare.interfaces.api.resources.health import HealthResource
from doccompare.interfaces.api.resources.versions import (
    VersionComparisonResource,
    VersionTextResource,
)

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    comparison_resource: VersionComparisonResource,
    text_resource: VersionTextResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route(
        "/v1/documents/{parent_id}/versions/compare/{version_a_id}/{version_b_id}",
        comparison_resource,
    )
    app.add_route(
        "/v1/documents/{parent_id}/versions/compare",
        comparison_resource,
        suffix="query",
    )
    app.add_route(
        "/v1/documents/{parent_id}/versions/{version_id}/text",
        text_resource,
    )
    return app
