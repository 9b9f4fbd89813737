from docsorter.config.settings import Settings
from docsorter.extraction.base import BaseTextExtractor
from docsorter.extraction.docx_adapter import DocxAdapter
from docsorter.extraction.extractor import TextExtractor
from docsorter.extraction.image_adapter import ImagePlaceholderAdapter
from docsorter.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docsorter.extraction.pymupdf_adapter import PyMuPdfAdapter
from docsorter.extraction.txt_adapter import TxtAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class TextExtractorFactory:
    """Builds a TextExtractor covering every supported upload type."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        image = ImagePlaceholderAdapter()
        return TextExtractor(
            {
                ".pdf": ("PDF", PdfExtractorFactory.create(settings)),
                ".docx": ("DOCX", DocxAdapter()),
                ".txt": ("TXT", TxtAdapter()),
                ".jpg": ("image", image),
                ".jpeg": ("image", image),
                ".png": ("image", image),
            }
        )
