"""Domain exceptions."""


class DocCompareError(Exception):
    """Base exception for doccompare."""

    pass


class CompareError(DocCompareError):
    """Comparison request could not be served."""

    pass


class MissingParameter(CompareError):
    """A required version identifier was not supplied."""

    def __init__(self, message: str = "Both version1Id and version2Id are required") -> None:
        super().__init__(message)


class SameVersion(CompareError):
    """Both identifiers point at the same version."""

    def __init__(self, message: str = "Cannot compare a version with itself") -> None:
        super().__init__(message)


class VersionNotFound(CompareError):
    """One of the requested versions does not exist.

    ``which`` is 1 for the first requested version, 2 for the second and
    None when a single version was requested.
    """

    def __init__(self, which: int | None, version_id: str | None = None) -> None:
        self.which = which
        self.version_id = version_id
        super().__init__(f"Version {which} not found" if which else "Version not found")


class ParentNotFound(CompareError):
    """The parent document does not exist."""

    def __init__(self, parent_id: str | None = None) -> None:
        self.parent_id = parent_id
        super().__init__("Template not found")


class CrossParentComparison(CompareError):
    """Versions belong to different parent documents."""

    def __init__(self, message: str = "Versions must belong to the same template") -> None:
        super().__init__(message)


class StorageUnavailable(CompareError):
    """Version store or blob store could not be reached."""

    pass


class BlobNotFound(CompareError):
    """A version's file is missing from the blob store."""

    def __init__(self, storage_key: str) -> None:
        self.storage_key = storage_key
        super().__init__(f"File not found in storage: {storage_key}")


class ExtractionError(DocCompareError):
    """Text could not be extracted from a file."""

    pass


class UnsupportedFormat(ExtractionError):
    """No extractor handles the file's format."""

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(f"Unsupported format: {mime_type or 'unknown'}")


class MalformedContainer(ExtractionError):
    """File claims a supported format but its structure is broken."""

    pass


class EnvironmentUnsupported(ExtractionError):
    """The runtime lacks something the extraction library depends on."""

    pass
