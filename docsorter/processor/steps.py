from docsorter.classification.base import BaseClassifier
from docsorter.extraction.extractor import TextExtractor
from docsorter.logging.logger import Log
from docsorter.processor.pipeline import PipelineContext, PipelineStep
from docsorter.storage.document_store import DocumentStore


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        context.extracted_text = self._text_extractor.extract(upload.path, upload.path.suffix)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {upload.original_filename}"
        )
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: BaseClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        context.classification = self._classifier.classify(
            context.upload.original_filename,
            context.extracted_text,
        )
        return context


class StoreDocumentStep(PipelineStep):
    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.classification is None:
            raise ValueError("PipelineContext.classification must be set before storing")
        context.store_result = self._store.store(
            context.upload.path,
            context.classification,
            context.upload.original_filename,
        )
        return context
