"""
Batch renaming of every PDF in a folder.

Files are processed one at a time in name order. The first extraction or
rename failure propagates out of the loop and ends the run; nothing is
retried or skipped.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .config import RenameConfig
from .extractor import PDFExtractor
from .parser import LegalDocumentParser
from .renamer import FileRenamer, RenamePlan

logger = logging.getLogger(__name__)


def find_pdfs(folder: Path) -> List[Path]:
    """PDF files directly inside `folder`, sorted by name."""
    return sorted(
        path for path in folder.iterdir()
        if path.is_file() and path.name.lower().endswith('.pdf')
    )


@dataclass
class BatchResult:
    """What a finished run did."""
    plans: List[RenamePlan] = field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        return len(self.plans)

    @property
    def renamed(self) -> int:
        if self.dry_run:
            return 0
        return sum(1 for plan in self.plans if not plan.is_noop)

    @property
    def unchanged(self) -> int:
        return sum(1 for plan in self.plans if plan.is_noop)

    @property
    def planned(self) -> int:
        """Files a dry run would have renamed."""
        if not self.dry_run:
            return 0
        return sum(1 for plan in self.plans if not plan.is_noop)


class BatchRenamer:
    """
    Extracts, parses and renames each PDF in the configured folder.

    The text source is injectable so the pipeline can run without
    pdfplumber in tests.
    """

    def __init__(
        self,
        config: RenameConfig,
        extractor: Optional[PDFExtractor] = None,
        parser: Optional[LegalDocumentParser] = None,
    ):
        self.config = config
        self.extractor = extractor or PDFExtractor()
        self.parser = parser or LegalDocumentParser()
        self.renamer = FileRenamer(config)

    def find_files(self) -> List[Path]:
        """
        List the PDFs to process.

        Raises:
            FileNotFoundError: If the target folder doesn't exist.
        """
        folder = self.config.target_folder
        if not folder.is_dir():
            raise FileNotFoundError(f"Folder not found: {folder}")
        return find_pdfs(folder)

    def process_file(self, pdf_path: Path) -> RenamePlan:
        """
        Run the full pipeline for one file.

        In dry-run mode the plan is computed but nothing is renamed.

        Raises:
            ExtractionError: If the PDF text cannot be read.
            RenameError: If the rename fails.
        """
        logger.debug(f"Processing: {pdf_path.name}")

        text = self.extractor.extract_text(pdf_path)
        info = self.parser.parse(text).with_default_case_number(
            self.config.default_case_number
        )
        plan = self.renamer.plan(pdf_path, info)

        if not self.config.dry_run:
            self.renamer.rename_file(plan)

        return plan

    def iter_process(self, files: Optional[List[Path]] = None) -> Iterator[RenamePlan]:
        """Process files one by one, yielding each plan once it is done."""
        for pdf_path in (self.find_files() if files is None else files):
            yield self.process_file(pdf_path)

    def run(
        self,
        files: Optional[List[Path]] = None,
        on_plan: Optional[Callable[[RenamePlan], None]] = None,
        result: Optional[BatchResult] = None,
    ) -> BatchResult:
        """
        Process the whole folder and return the outcome.

        Args:
            files: Files to process (defaults to the configured folder).
            on_plan: Called with each plan as soon as its file is done.
            result: Collects the plans; pass one in to keep the partial
                    outcome when a failure aborts the run.
        """
        if result is None:
            result = BatchResult(dry_run=self.config.dry_run)
        for plan in self.iter_process(files):
            result.plans.append(plan)
            if on_plan:
                on_plan(plan)
        logger.debug(
            f"Batch complete: {result.total} files, {result.renamed} renamed, "
            f"{result.unchanged} unchanged"
        )
        return result
