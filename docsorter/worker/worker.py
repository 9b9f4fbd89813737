import time
from pathlib import Path

from docsorter.config.settings import Settings
from docsorter.logging.logger import Log
from docsorter.processor.batch_processor import BatchProcessor
from docsorter.processor.models import BatchSummary, UploadedFile
from docsorter.processor.upload_intake import UploadIntake


class Worker:
    """Poll loop over the inbox directory: claim -> batch -> sleep."""

    def __init__(
        self,
        intake: UploadIntake,
        batch_processor: BatchProcessor,
        settings: Settings,
    ) -> None:
        self._intake = intake
        self._batch_processor = batch_processor
        self._settings = settings
        self._inbox_dir = Path(settings.inbox_dir)

    def run(self, max_batches: int | None = None) -> None:
        """Main poll loop. Runs forever until interrupted.

        If max_batches is set, stop after processing that many batches (for testing).
        """
        Log.info(f"Worker started, watching {self._inbox_dir}")
        batches_done = 0
        try:
            while True:
                if max_batches is not None and batches_done >= max_batches:
                    break
                files = self._try_claim_files()
                if files:
                    self._run_batch(files)
                    batches_done += 1
                else:
                    Log.debug("Inbox empty, sleeping")
                    time.sleep(self._settings.inbox_poll_interval_seconds)
        except KeyboardInterrupt:
            Log.info("Worker shutting down gracefully")

    def _run_batch(self, files: list[UploadedFile]) -> BatchSummary:
        summary = self._batch_processor.process_batch(files)
        # outcomes follow the order of files
        for upload, outcome in zip(files, summary.outcomes):
            if not outcome.success:
                Log.warning(f"Failed to sort {outcome.original_filename}: {outcome.error}")
            self._settle(upload, outcome.success)
        return summary

    def _settle(self, upload: UploadedFile, succeeded: bool) -> None:
        try:
            self._intake.settle_inbox_file(upload, succeeded)
        except OSError as exc:
            Log.error(f"Could not settle inbox file {upload.inbox_source}: {exc}")

    def _try_claim_files(self) -> list[UploadedFile]:
        """Claim pending inbox files. Filesystem errors are retried on the next poll."""
        try:
            return self._intake.claim_inbox(self._inbox_dir)
        except Exception as exc:
            Log.warning(f"Inbox error, will retry: {exc}")
            return []
