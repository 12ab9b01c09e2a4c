"""
File renaming module.

Builds the target filename from document metadata and renames PDFs in
place, with collision handling.
"""

import hashlib
import logging
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .config import RenameConfig
from .errors import RenameError
from .parser import DocumentMetadata

logger = logging.getLogger(__name__)


# Characters Windows and macOS refuse in filenames
UNSAFE_CHARS_PATTERN = re.compile(r'[\\/:*?"<>|]')


def sanitize_filename(name: str) -> str:
    """Remove filesystem-unsafe characters, keeping everything else in order."""
    return UNSAFE_CHARS_PATTERN.sub('', name)


def compose_filename(info: DocumentMetadata, client_name: str, opponent_name: str) -> str:
    """
    Compose the target filename.

    Format:
        YYMMDD_Title(ClientvsOpponent, CaseNumber)_Author.pdf

    The ", CaseNumber" part is left out when there is no case number.
    """
    case_part = f", {info.case_number}" if info.case_number else ""
    filename = (
        f"{info.date}_{info.title}"
        f"({client_name}vs{opponent_name}{case_part})"
        f"_{info.author}.pdf"
    )
    return sanitize_filename(filename)


@dataclass(frozen=True)
class RenamePlan:
    """Where a PDF is going, and why."""
    source: Path
    target: Path
    metadata: DocumentMetadata

    @property
    def is_noop(self) -> bool:
        return self.source == self.target


class FileRenamer:
    """
    Renames PDF files according to the naming convention.

    Naming Convention:
        YYMMDD_Title(ClientvsOpponent[, CaseNumber])_Author.pdf

    Collision Handling:
        If a different file already has the target name, append
        _<shorthash> before .pdf. Existing files are never overwritten.
    """

    def __init__(self, config: RenameConfig):
        self.config = config

    def generate_filename(self, info: DocumentMetadata) -> str:
        """Generate the target filename using the configured party names."""
        return compose_filename(info, self.config.client_name, self.config.opponent_name)

    def plan(self, source_path: Union[str, Path], info: DocumentMetadata) -> RenamePlan:
        """
        Work out the target path for a file without touching the disk.

        Args:
            source_path: Path to the source PDF file.
            info: Parsed document metadata.

        Returns:
            RenamePlan with the collision-free target path.
        """
        source_path = Path(source_path)
        target_path = source_path.parent / self.generate_filename(info)

        if target_path != source_path and target_path.exists():
            target_path = self._handle_collision(source_path, target_path)

        return RenamePlan(source=source_path, target=target_path, metadata=info)

    def rename_file(self, plan: RenamePlan) -> Path:
        """
        Carry out a rename plan.

        Returns:
            Path to the renamed file (the source path for a no-op plan).

        Raises:
            FileNotFoundError: If the source file doesn't exist.
            RenameError: If the filesystem rejects the rename.
        """
        source_path = plan.source

        if not source_path.exists():
            raise FileNotFoundError(f"Source file not found: {source_path}")

        if plan.is_noop:
            logger.debug(f"Name unchanged: {source_path.name}")
            return source_path

        logger.debug(f"Renaming file: {source_path.name} -> {plan.target.name}")

        try:
            shutil.move(str(source_path), str(plan.target))
        except OSError as e:
            logger.error(f"Rename failed: {source_path.name}: {type(e).__name__}")
            raise RenameError(source_path, plan.target, e) from e

        return plan.target

    def _handle_collision(self, source_path: Path, target_path: Path) -> Path:
        """
        Handle filename collision by appending a short hash.

        Args:
            source_path: Original source file (used for hash).
            target_path: Desired target path that already exists.

        Returns:
            New target path with hash suffix.
        """
        short_hash = self._compute_short_hash(source_path)

        stem = target_path.stem
        new_target = target_path.parent / f"{stem}_{short_hash}.pdf"

        # Handle rare case of hash collision too
        counter = 1
        while new_target.exists() and new_target != source_path:
            new_target = target_path.parent / f"{stem}_{short_hash}_{counter}.pdf"
            counter += 1

        logger.debug(f"Collision handled: using hash suffix {short_hash}")

        return new_target

    def _compute_short_hash(self, file_path: Path) -> str:
        """
        Compute a short hash of file content.

        Returns:
            6-character hex hash.
        """
        hasher = hashlib.md5()

        with open(file_path, 'rb') as f:
            for chunk in iter(lambda: f.read(8192), b''):
                hasher.update(chunk)

        return hasher.hexdigest()[:6]
