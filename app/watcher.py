"""
Folder watcher for automatic PDF processing.

Watches the target folder for new PDFs and renames them as they arrive.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Set

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileCreatedEvent

from core import BatchRenamer, RenameConfig, RenamerError

logger = logging.getLogger(__name__)


class PDFHandler(FileSystemEventHandler):
    """Handler for PDF file events."""

    def __init__(self, config: RenameConfig, batch: Optional[BatchRenamer] = None):
        super().__init__()
        self.batch = batch or BatchRenamer(config)
        self.processed_files: Set[Path] = set()

    def on_created(self, event):
        """Handle file creation event."""
        if not isinstance(event, FileCreatedEvent):
            return

        path = Path(event.src_path)

        if path.suffix.lower() != '.pdf':
            return

        # Our own renames show up as new files too
        if path in self.processed_files:
            return

        # Wait a moment for file to be fully written
        time.sleep(0.5)

        self.process_pdf(path)

    def process_pdf(self, pdf_path: Path) -> Optional[Path]:
        """
        Process a single PDF file; failures are logged, not raised.

        Returns:
            Where the file is now (unchanged for dry runs and no-op
            renames), or None if it could not be processed.
        """
        if not pdf_path.exists():
            return None

        logger.info(f"Processing: {pdf_path.name}")

        try:
            plan = self.batch.process_file(pdf_path)
        except (RenamerError, OSError) as e:
            logger.error(f"Failed to process {pdf_path.name}: {e}")
            return None

        if plan.is_noop:
            logger.info(f"Name unchanged: {plan.source.name}")
            return plan.source

        if self.batch.config.dry_run:
            logger.info(f"Would rename to: {plan.target.name}")
            return plan.source

        self.processed_files.add(plan.target)
        logger.info(f"Renamed to: {plan.target.name}")
        return plan.target


class FolderWatcher:
    """Watches a folder for new PDFs."""

    def __init__(self, config: RenameConfig):
        self.watch_folder = config.target_folder
        self.observer = Observer()
        self.handler = PDFHandler(config)

    def start(self):
        """Start watching the folder; blocks until interrupted."""
        self.observer.schedule(
            self.handler,
            str(self.watch_folder),
            recursive=False
        )
        self.observer.start()

        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.observer.stop()

        self.observer.join()

    def stop(self):
        """Stop watching."""
        self.observer.stop()
        self.observer.join()
