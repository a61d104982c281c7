"""Text extraction from CV files."""

from .pdf_extractor import extract_cv_text, is_pdf

__all__ = ["extract_cv_text", "is_pdf"]
