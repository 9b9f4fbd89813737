"""Command-line entry point.

Usage:
    docsorter upload FILE [FILE ...]
    docsorter list
    docsorter delete-document FOLDER FILENAME
    docsorter delete-folder FOLDER
    docsorter preview FOLDER FILENAME
    docsorter watch
"""

import argparse
import json
import sys
from pathlib import Path

from docsorter.config.settings import Settings
from docsorter.logging.logger import Log
from docsorter.processor.batch_processor import BatchProcessor, build_batch_processor
from docsorter.processor.exceptions import ProcessorError
from docsorter.processor.upload_intake import UploadIntake
from docsorter.storage.document_store import DocumentStore
from docsorter.storage.models import DeleteResult
from docsorter.worker.worker import Worker


class App:
    """Explicitly wired dependencies shared by the CLI commands."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store = DocumentStore(Path(settings.storage_root))
        self.intake = UploadIntake(
            upload_dir=Path(settings.upload_dir),
            allowed_extensions=settings.allowed_extensions,
            max_files=settings.max_files_per_request,
        )
        self._batch_processor: BatchProcessor | None = None

    @property
    def batch_processor(self) -> BatchProcessor:
        if self._batch_processor is None:
            self._batch_processor = build_batch_processor(self.settings, store=self.store)
        return self._batch_processor


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build dependencies -> run command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    settings = Settings()
    Log.configure(settings.log_level)
    app = App(settings)
    return int(args.func(app, args))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsorter",
        description="Sort uploaded documents into AI-classified category folders",
    )
    subparsers = parser.add_subparsers(dest="command")

    upload = subparsers.add_parser("upload", help="Classify and store files")
    upload.add_argument("files", nargs="+", type=Path)
    upload.set_defaults(func=_cmd_upload)

    list_cmd = subparsers.add_parser("list", help="List stored documents by folder")
    list_cmd.set_defaults(func=_cmd_list)

    delete_doc = subparsers.add_parser("delete-document", help="Delete one stored document")
    delete_doc.add_argument("folder")
    delete_doc.add_argument("filename")
    delete_doc.set_defaults(func=_cmd_delete_document)

    delete_folder = subparsers.add_parser(
        "delete-folder", help="Delete a folder and all its documents"
    )
    delete_folder.add_argument("folder")
    delete_folder.set_defaults(func=_cmd_delete_folder)

    preview = subparsers.add_parser("preview", help="Show where a stored file lives")
    preview.add_argument("folder")
    preview.add_argument("filename")
    preview.set_defaults(func=_cmd_preview)

    watch = subparsers.add_parser("watch", help="Poll the inbox directory and sort new files")
    watch.set_defaults(func=_cmd_watch)

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _cmd_upload(app: App, args: argparse.Namespace) -> int:
    try:
        uploads = app.intake.accept(args.files)
    except ProcessorError as exc:
        Log.error(f"Upload rejected: {exc}")
        _print_json({"error": str(exc)})
        return 1
    Log.info(f"Processing {len(uploads)} files...")
    summary = app.batch_processor.process_batch(uploads)
    _print_json(summary.to_dict())
    return 0 if summary.failed == 0 else 1


def _cmd_list(app: App, args: argparse.Namespace) -> int:
    documents = app.store.list_documents()
    _print_json({folder: [m.to_dict() for m in docs] for folder, docs in documents.items()})
    return 0


def _report_delete(result: DeleteResult) -> int:
    payload: dict[str, object] = {"success": result.success, "message": result.message}
    if result.reason is not None:
        payload["reason"] = result.reason.value
    _print_json(payload)
    return 0 if result.success else 1


def _cmd_delete_document(app: App, args: argparse.Namespace) -> int:
    return _report_delete(app.store.delete_document(args.folder, args.filename))


def _cmd_delete_folder(app: App, args: argparse.Namespace) -> int:
    return _report_delete(app.store.delete_folder(args.folder))


def _cmd_preview(app: App, args: argparse.Namespace) -> int:
    preview = app.store.preview(args.folder, args.filename)
    if preview is None:
        _print_json({"error": "File not found"})
        return 1
    _print_json(
        {"path": str(preview.path), "content_type": preview.content_type, "size": preview.size}
    )
    return 0


def _cmd_watch(app: App, args: argparse.Namespace) -> int:
    Worker(app.intake, app.batch_processor, app.settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
