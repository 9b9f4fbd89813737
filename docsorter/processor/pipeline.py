from abc import ABC, abstractmethod
from dataclasses import dataclass

from docsorter.classification.models import ClassificationResult
from docsorter.processor.models import UploadedFile
from docsorter.storage.models import StoreResult


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    extracted_text: str = ""
    classification: ClassificationResult | None = None
    store_result: StoreResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
