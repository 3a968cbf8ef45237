"""Shared fixtures: build small PDFs and documents on the fly."""
import base64
import json
from pathlib import Path
from typing import Callable

import fitz
import pytest

from e2ekit.models.document import Document


def render_pdf(pages: list[str]) -> bytes:
    """Render one text block per page into an in-memory PDF."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes() -> Callable[[list[str]], bytes]:
    return render_pdf


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Write a PDF with the given page texts and return its path."""
    def _make(pages: list[str], name: str = "sample.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(render_pdf(pages))
        return path
    return _make


@pytest.fixture
def three_page_document() -> Document:
    return Document.from_lines([
        ["  Invoice Total ", "", "See https://example.com/a for info"],
        ["No match here", "   "],
        ["total due: 10"],
    ])


@pytest.fixture
def make_jwt() -> Callable[[dict], str]:
    """Build an unsigned JWT carrying the given payload."""
    def _make(payload: dict) -> str:
        def segment(data: dict) -> str:
            raw = json.dumps(data).encode()
            return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()
        return f"{segment({'alg': 'HS256'})}.{segment(payload)}.signature"
    return _make
