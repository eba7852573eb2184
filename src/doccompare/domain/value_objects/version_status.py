"""Lifecycle status of a document version."""

from enum import StrEnum


class VersionStatus(StrEnum):
    """Statuses a version can carry."""

    DRAFT = "draft"
    APPROVED = "approved"
    DEPRECATED = "deprecated"
