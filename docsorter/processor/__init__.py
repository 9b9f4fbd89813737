from docsorter.processor.batch_processor import BatchProcessor, build_batch_processor
from docsorter.processor.models import BatchSummary, ProcessingOutcome, UploadedFile
from docsorter.processor.processor import Processor, build_processor
from docsorter.processor.upload_intake import UploadIntake

__all__ = [
    "BatchProcessor",
    "BatchSummary",
    "ProcessingOutcome",
    "Processor",
    "UploadIntake",
    "UploadedFile",
    "build_batch_processor",
    "build_processor",
]
