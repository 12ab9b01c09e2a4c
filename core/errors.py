"""Exceptions raised while processing a folder of PDFs."""

from pathlib import Path
from typing import Optional


class RenamerError(Exception):
    """Base class for errors that abort a rename run."""


class ExtractionError(RenamerError):
    """The text source could not read a PDF (corrupt, encrypted, not a PDF)."""

    def __init__(self, path: Optional[Path], cause: BaseException):
        self.path = path
        self.cause = cause
        where = path.name if path else "<bytes>"
        super().__init__(f"Could not extract text from {where}: {type(cause).__name__}: {cause}")


class RenameError(RenamerError):
    """The filesystem refused to rename a file."""

    def __init__(self, source: Path, target: Path, cause: BaseException):
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"Could not rename {source.name} -> {target.name}: {cause}")
