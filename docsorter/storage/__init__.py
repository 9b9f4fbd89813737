from docsorter.storage.document_store import DocumentStore
from docsorter.storage.models import (
    DeleteFailure,
    DeleteResult,
    DocumentMetadata,
    PreviewFile,
    StoreResult,
)

__all__ = [
    "DeleteFailure",
    "DeleteResult",
    "DocumentMetadata",
    "DocumentStore",
    "PreviewFile",
    "StoreResult",
]
