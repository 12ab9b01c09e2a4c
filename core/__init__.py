"""Core legal PDF metadata extraction and renaming logic."""

from .batch import BatchRenamer, BatchResult
from .config import RenameConfig
from .errors import ExtractionError, RenameError, RenamerError
from .extractor import PDFExtractor
from .parser import DocumentMetadata, LegalDocumentParser
from .renamer import FileRenamer, RenamePlan, compose_filename

__all__ = [
    "BatchRenamer", "BatchResult", "RenameConfig",
    "ExtractionError", "RenameError", "RenamerError",
    "PDFExtractor", "DocumentMetadata", "LegalDocumentParser",
    "FileRenamer", "RenamePlan", "compose_filename",
]
