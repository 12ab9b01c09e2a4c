"""
PDF text extraction module.

Uses pdfplumber for text extraction. Layout is flattened to plain text,
one page after another; reading order within a page is whatever
pdfplumber reports.
"""

import io
import logging
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from .errors import ExtractionError

logger = logging.getLogger(__name__)


class PDFExtractor:
    """
    Extracts text content from PDF files.

    Scanned (image-only) pages yield no text; no OCR is attempted.
    """

    def extract_text(self, pdf_path: Union[str, Path]) -> str:
        """
        Extract all text from a PDF file.

        Args:
            pdf_path: Path to the PDF file.

        Returns:
            Extracted text as a string with normalized whitespace.

        Raises:
            FileNotFoundError: If the PDF file doesn't exist.
            ExtractionError: If the PDF cannot be read or parsed.
        """
        pdf_path = Path(pdf_path)

        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")

        logger.debug(f"Extracting text from: {pdf_path}")

        text = self.extract_text_from_bytes(pdf_path.read_bytes(), source=pdf_path)

        logger.debug(f"Extraction complete: {pdf_path.name}, {len(text)} characters")
        return text

    def extract_text_from_bytes(self, data: bytes, source: Optional[Path] = None) -> str:
        """
        Extract text from raw PDF bytes.

        Args:
            data: The PDF file content.
            source: Where the bytes came from, reported in errors only.
        """
        try:
            text_parts = []

            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)

        except Exception as e:
            logger.error(f"Failed to extract text: {type(e).__name__}")
            raise ExtractionError(source, e) from e

        return self._normalize_whitespace("\n".join(text_parts))

    def _normalize_whitespace(self, text: str) -> str:
        """
        Normalize whitespace in extracted text.

        - Preserves line breaks
        - Collapses runs of spaces to a single space
        - Strips leading/trailing whitespace from lines
        """
        return '\n'.join(' '.join(line.split()) for line in text.split('\n'))
