"""Plain-text extraction from uploaded documents."""

from __future__ import annotations

import io
import logging
from typing import Protocol

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .errors import ExtractionError

logger = logging.getLogger(__name__)


class DocumentExtractor(Protocol):
    """Protocol for document extraction implementations."""

    def extract_text(self, data: bytes) -> str:
        """Extract plain text from a binary document."""
        ...


class PdfExtractor:
    """PDF extraction using pypdf."""

    def extract_text(self, data: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(data))
            text_parts = []
            for page in reader.pages:
                text = page.extract_text()
                if text:
                    text_parts.append(text)
        except PyPdfError as e:
            raise ExtractionError(f"Could not read PDF: {e}")
        except Exception as e:
            # Malformed files also surface as AttributeError, IndexError and the like
            logger.debug("PDF parsing failed", exc_info=True)
            raise ExtractionError(f"Could not read PDF: {type(e).__name__}: {e}")

        logger.debug("Extracted %d pages of text from PDF", len(text_parts))
        return "\n\n".join(text_parts)
