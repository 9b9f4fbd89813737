from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docsorter.extraction.exceptions import ExtractionError, UnsupportedFileTypeError
from docsorter.extraction.extractor import TextExtractor
from docsorter.extraction.factory import TextExtractorFactory


def _make_settings(pdf_engine: str = "pdfplumber") -> MagicMock:
    return MagicMock(pdf_engine=pdf_engine)


class TestDispatch:
    def test_routes_by_extension(self, tmp_path: Path) -> None:
        pdf_adapter = MagicMock()
        pdf_adapter.extract.return_value = "pdf text"
        extractor = TextExtractor({".pdf": ("PDF", pdf_adapter)})
        path = tmp_path / "a.pdf"

        assert extractor.extract(path, ".pdf") == "pdf text"
        pdf_adapter.extract.assert_called_once_with(path)

    def test_extension_is_case_insensitive(self, tmp_path: Path) -> None:
        adapter = MagicMock()
        adapter.extract.return_value = "ok"
        extractor = TextExtractor({".TXT": ("TXT", adapter)})
        assert extractor.extract(tmp_path / "a.TXT", ".Txt") == "ok"

    def test_unsupported_extension_raises(self, tmp_path: Path) -> None:
        extractor = TextExtractor({})
        with pytest.raises(UnsupportedFileTypeError, match="Unsupported file type: .exe"):
            extractor.extract(tmp_path / "virus.exe", ".exe")

    def test_adapter_failure_returns_error_string(self, tmp_path: Path) -> None:
        adapter = MagicMock()
        adapter.extract.side_effect = ExtractionError("broken xref")
        extractor = TextExtractor({".pdf": ("PDF", adapter)})

        result = extractor.extract(tmp_path / "bad.pdf", ".pdf")

        assert result == "Error extracting PDF text: broken xref"

    def test_supported_extensions_listed(self) -> None:
        extractor = TextExtractorFactory.create(_make_settings())
        assert extractor.supported_extensions == [
            ".docx", ".jpeg", ".jpg", ".pdf", ".png", ".txt",
        ]


class TestRealAdapters:
    def test_extracts_txt(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("  Class notes for Monday\n", encoding="utf-8")
        extractor = TextExtractorFactory.create(_make_settings())
        assert extractor.extract(path, ".txt") == "Class notes for Monday"

    def test_extracts_docx_paragraphs_and_tables(self, sample_docx_path: Path) -> None:
        extractor = TextExtractorFactory.create(_make_settings())
        result = extractor.extract(sample_docx_path, ".docx")
        assert "Employment Contract" in result
        assert "This agreement is made between the parties." in result
        assert "Salary | 50000" in result

    @pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
    def test_extracts_pdf(self, engine: str, sample_pdf_path: Path) -> None:
        extractor = TextExtractorFactory.create(_make_settings(engine))
        assert "Monthly Bank Statement" in extractor.extract(sample_pdf_path, ".pdf")

    @pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
    def test_multi_page_pdf(self, engine: str, tmp_path: Path, multi_page_pdf_bytes: bytes) -> None:
        path = tmp_path / "two.pdf"
        path.write_bytes(multi_page_pdf_bytes)
        result = TextExtractorFactory.create(_make_settings(engine)).extract(path, ".pdf")
        assert "Page one content" in result
        assert "Page two content" in result

    def test_empty_pdf_returns_empty_string(self, tmp_path: Path, empty_pdf_bytes: bytes) -> None:
        path = tmp_path / "blank.pdf"
        path.write_bytes(empty_pdf_bytes)
        assert TextExtractorFactory.create(_make_settings()).extract(path, ".pdf") == ""

    @pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
    def test_corrupt_pdf_returns_error_string(self, engine: str, tmp_path: Path) -> None:
        path = tmp_path / "corrupt.pdf"
        path.write_bytes(b"not a pdf")
        result = TextExtractorFactory.create(_make_settings(engine)).extract(path, ".pdf")
        assert result.startswith("Error extracting PDF text:")

    def test_corrupt_docx_returns_error_string(self, tmp_path: Path) -> None:
        path = tmp_path / "corrupt.docx"
        path.write_bytes(b"not a zip")
        result = TextExtractorFactory.create(_make_settings()).extract(path, ".docx")
        assert result.startswith("Error extracting DOCX text:")

    def test_non_utf8_txt_returns_error_string(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        result = TextExtractorFactory.create(_make_settings()).extract(path, ".txt")
        assert result.startswith("Error extracting TXT text:")

    @pytest.mark.parametrize("ext", [".jpg", ".jpeg", ".png"])
    def test_image_is_placeholder(self, ext: str, tmp_path: Path) -> None:
        path = tmp_path / f"scan{ext}"
        path.write_bytes(b"\x89PNG")
        result = TextExtractorFactory.create(_make_settings()).extract(path, ext)
        assert result == f"Image file: scan{ext} (OCR not implemented yet)"
