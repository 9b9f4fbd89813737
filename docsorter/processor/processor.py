from pathlib import Path

from docsorter.classification.factory import ClassifierFactory
from docsorter.config.settings import Settings
from docsorter.extraction.factory import TextExtractorFactory
from docsorter.logging.logger import Log
from docsorter.processor.models import ProcessingOutcome, UploadedFile
from docsorter.processor.pipeline import PipelineContext, PipelineStep
from docsorter.processor.steps import ClassifyStep, ExtractTextStep, StoreDocumentStep
from docsorter.storage.document_store import DocumentStore


class Processor:
    """Runs one upload through the pipeline: extract -> classify -> store.

    Any step failure becomes a failed outcome. The transient upload is
    removed afterwards whether or not processing succeeded.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, upload: UploadedFile) -> ProcessingOutcome:
        Log.info(f"Processing file: {upload.original_filename}")
        context = PipelineContext(upload=upload)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Error processing {upload.original_filename}: {exc}")
            return ProcessingOutcome.failed(upload.original_filename, str(exc))
        finally:
            self._remove_transient(upload.path)

        if context.store_result is None:
            return ProcessingOutcome.failed(
                upload.original_filename, "Pipeline finished without storing the document"
            )
        Log.info(
            f"Successfully processed: {upload.original_filename} -> {context.store_result.folder}"
        )
        return ProcessingOutcome.succeeded(upload.original_filename, context.store_result)

    @staticmethod
    def _remove_transient(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Error cleaning up {path}: {exc}")


def build_processor(
    settings: Settings,
    store: DocumentStore | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if store is None:
        store = DocumentStore(Path(settings.storage_root))
    steps: list[PipelineStep] = [
        ExtractTextStep(text_extractor=TextExtractorFactory.create(settings)),
        ClassifyStep(classifier=ClassifierFactory.create(settings)),
        StoreDocumentStep(store=store),
    ]
    return Processor(steps=steps)
