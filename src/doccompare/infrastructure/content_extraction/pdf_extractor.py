"""Extractor for PDF."""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import DependencyError, FileNotDecryptedError

from doccompare.domain.exceptions import EnvironmentUnsupported, MalformedContainer

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"


def _environment_message(exc: Exception) -> str:
    return (
        "PDF text extraction is not available in this environment "
        f"({exc}). Install the optional pypdf dependencies to compare PDF content."
    )


def extract_pdf_text(data: bytes) -> str:
    """Extract text of every page, pages separated by newlines."""
    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            reader.decrypt("")
        parts = [page.extract_text() or "" for page in reader.pages]
    except (DependencyError, ImportError) as e:
        logger.warning("PDF extraction unavailable: %s", e)
        raise EnvironmentUnsupported(_environment_message(e)) from e
    except FileNotDecryptedError as e:
        raise MalformedContainer("PDF is encrypted and cannot be read") from e
    except Exception as e:
        raise MalformedContainer(f"Invalid or corrupted PDF: {e}") from e
    return "\n".join(parts)
