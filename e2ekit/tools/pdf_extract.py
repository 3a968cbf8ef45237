"""Read raw per-page text lines from PDFs using PyMuPDF with pdfplumber fallback."""
import logging
from pathlib import Path
from typing import Optional

from e2ekit.errors import PdfExtractionError
from e2ekit.models.document import Document, Page

logger = logging.getLogger(__name__)


def extract_pages_from_pdf(file_path: Path) -> tuple[Optional[Document], Optional[str]]:
    """
    Extract raw text lines for every page of a PDF.

    Uses PyMuPDF (fitz) as primary method, falls back to pdfplumber if needed.
    Lines are returned exactly as split from the page text (no trimming).

    Returns:
        (Document, error_message)
        If successful: (Document, None)
        If failed: (None, error_message)
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        return None, f"PDF not found: {file_path}"
    if not _has_pdf_header(file_path):
        return None, f"Not a PDF file: {file_path}"

    # Try PyMuPDF first
    result = _extract_with_pymupdf(file_path)
    if result is not None:
        return result, None

    # Fallback to pdfplumber
    logger.warning("PyMuPDF could not read %s, trying pdfplumber", file_path)
    result = _extract_with_pdfplumber(file_path)
    if result is not None:
        return result, None

    # Both failed
    return None, f"Failed to extract text from {file_path} with both PyMuPDF and pdfplumber"


def load_document(file_path: Path) -> Document:
    """Like extract_pages_from_pdf, but raise PdfExtractionError on failure."""
    document, error = extract_pages_from_pdf(file_path)
    if document is None:
        raise PdfExtractionError(error or f"Unknown extraction error: {file_path}")
    logger.info("Extracted %d pages from %s", len(document.pages), file_path)
    return document


def _has_pdf_header(file_path: Path) -> bool:
    """True if the %PDF- marker appears in the first 1024 bytes."""
    with open(file_path, "rb") as f:
        return b"%PDF-" in f.read(1024)


def _extract_with_pymupdf(file_path: Path) -> Optional[Document]:
    """Extract lines using PyMuPDF (fitz). Returns None on failure."""
    try:
        import fitz

        # filetype keeps fitz from opening HTML or images saved with a .pdf name
        doc = fitz.open(file_path, filetype="pdf")
        if not doc.is_pdf:
            doc.close()
            return None
        pages = []
        try:
            for page_num in range(len(doc)):
                text = doc[page_num].get_text() or ""
                pages.append(Page(lines=text.splitlines()))
        finally:
            doc.close()

        return Document(pages=pages, source=str(file_path))
    except Exception as e:
        logger.debug("PyMuPDF extraction failed for %s: %s", file_path, e)
        return None


def _extract_with_pdfplumber(file_path: Path) -> Optional[Document]:
    """Extract lines using pdfplumber. Returns None on failure."""
    try:
        import pdfplumber

        pages = []
        with pdfplumber.open(file_path) as pdf:
            for page in pdf.pages:
                text = page.extract_text() or ""
                pages.append(Page(lines=text.splitlines()))

        return Document(pages=pages, source=str(file_path))
    except Exception as e:
        logger.debug("pdfplumber extraction failed for %s: %s", file_path, e)
        return None
