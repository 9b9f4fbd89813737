from docsorter.extraction.base import BaseTextExtractor
from docsorter.extraction.extractor import TextExtractor
from docsorter.extraction.factory import TextExtractorFactory

__all__ = ["BaseTextExtractor", "TextExtractor", "TextExtractorFactory"]
