import io
from pathlib import Path

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docsorter.classification.models import ClassificationResult


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Monthly Bank Statement")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "statement.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture()
def sample_docx_path(tmp_path: Path) -> Path:
    """Write a Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Employment Contract")
    document.add_paragraph("This agreement is made between the parties.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Salary"
    table.rows[0].cells[1].text = "50000"
    path = tmp_path / "contract.docx"
    document.save(str(path))
    return path


@pytest.fixture()
def bank_classification() -> ClassificationResult:
    return ClassificationResult(
        category="Financial",
        subcategory="Checking account statement",
        confidence=0.92,
        suggested_folder_name="bank statements",
        description="Monthly checking account statement",
    )
