from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait

from docsorter.config.settings import Settings
from docsorter.logging.logger import Log
from docsorter.processor.models import BatchSummary, ProcessingOutcome, UploadedFile
from docsorter.processor.processor import Processor, build_processor
from docsorter.storage.document_store import DocumentStore


class BatchProcessor:
    """Processes uploads in fixed-size chunks.

    Files within a chunk run concurrently; the next chunk starts only after
    every file of the current one has finished. Outcomes are placed by input
    index, so the summary follows submission order regardless of which file
    finishes first.
    """

    def __init__(self, processor: Processor, chunk_size: int = 3) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self._processor = processor
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def process_batch(self, files: Sequence[UploadedFile]) -> BatchSummary:
        Log.info(f"Adding {len(files)} files to processing queue")
        outcomes: list[ProcessingOutcome | None] = [None] * len(files)

        with ThreadPoolExecutor(
            max_workers=self._chunk_size, thread_name_prefix="docsorter-batch"
        ) as executor:
            for start in range(0, len(files), self._chunk_size):
                chunk = files[start : start + self._chunk_size]
                Log.info(
                    f"Processing batch {start // self._chunk_size + 1}: {len(chunk)} files"
                )
                futures: dict[Future[ProcessingOutcome], int] = {
                    executor.submit(self._processor.process, upload): start + offset
                    for offset, upload in enumerate(chunk)
                }
                wait(futures)
                for future, index in futures.items():
                    outcomes[index] = self._collect(future, files[index])

        summary = BatchSummary.from_outcomes([o for o in outcomes if o is not None])
        Log.info(
            f"Processing complete: {summary.successful} successful, {summary.failed} failed"
        )
        return summary

    @staticmethod
    def _collect(
        future: Future[ProcessingOutcome], upload: UploadedFile
    ) -> ProcessingOutcome:
        try:
            return future.result()
        except Exception as exc:
            Log.error(f"Unexpected error processing {upload.original_filename}: {exc}")
            return ProcessingOutcome.failed(upload.original_filename, str(exc))


def build_batch_processor(
    settings: Settings,
    store: DocumentStore | None = None,
) -> BatchProcessor:
    """Build a BatchProcessor wired from settings."""
    return BatchProcessor(
        processor=build_processor(settings, store=store),
        chunk_size=settings.batch_chunk_size,
    )
