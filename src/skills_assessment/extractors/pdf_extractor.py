"""CV text extraction from PDF files, for providers without native document input."""

import logging
from io import BytesIO

import pdfplumber

from ..errors import FileError

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"


def is_pdf(file_content: bytes) -> bool:
    """Check the PDF header signature."""
    return file_content[:1024].lstrip().startswith(PDF_MAGIC)


def _read_pages(file_content: bytes) -> list[str]:
    with pdfplumber.open(BytesIO(file_content)) as pdf:
        if not pdf.pages:
            raise FileError("CV PDF has no pages")
        return [text for text in (page.extract_text() for page in pdf.pages) if text]


def extract_cv_text(file_content: bytes, max_length: int | None = None) -> str:
    """
    Extract the text of a CV PDF, pages separated by blank lines.

    Args:
        file_content: Raw bytes of the PDF file.
        max_length: Truncate the text to this many characters.

    Raises:
        FileError: If the PDF cannot be read or holds no text (e.g. a scan).
    """
    try:
        pages = _read_pages(file_content)
    except FileError:
        raise
    except Exception as e:
        logger.error(f"Could not open CV PDF: {e}")
        raise FileError(f"Could not read CV PDF: {e}") from e

    if not pages:
        raise FileError("No text could be extracted from the CV PDF")

    text = "\n\n".join(pages)
    if max_length is not None and len(text) > max_length:
        logger.warning(f"CV text truncated from {len(text)} to {max_length} chars")
        text = text[:max_length]

    logger.info(f"Extracted {len(text)} chars of CV text from {len(pages)} pages")
    return text
