"""
Legal PDF Renamer - Main Application Entry Point.

Usage:
    python -m app --client 주식회사준 --opponent 세움엔키움주식회사 [FOLDER]
    python -m app ... --dry-run         # Show new names, rename nothing
    python -m app ... --watch           # Watch folder mode

Every option falls back to an environment variable (TARGET_FOLDER,
CLIENT_NAME, OPPONENT_NAME, DEFAULT_CASE_NUM).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from core import BatchRenamer, BatchResult, RenameConfig, RenamePlan, RenamerError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def setup_argparser() -> argparse.ArgumentParser:
    """Set up command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='legal-pdf-renamer',
        description='Rename legal PDFs as YYMMDD_Title(ClientvsOpponent, CaseNo)_Author.pdf.'
    )

    parser.add_argument(
        'folder',
        nargs='?',
        type=Path,
        help='Folder containing the PDFs (default: $TARGET_FOLDER or ./docs).'
    )

    parser.add_argument(
        '--client',
        metavar='NAME',
        help='Client party name (default: $CLIENT_NAME).'
    )

    parser.add_argument(
        '--opponent',
        metavar='NAME',
        help='Opposing party name (default: $OPPONENT_NAME).'
    )

    parser.add_argument(
        '--case-number',
        metavar='CASE',
        help='Case number for documents that do not print one (default: $DEFAULT_CASE_NUM).'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the new names without renaming anything.'
    )

    parser.add_argument(
        '--watch',
        action='store_true',
        help='Keep running and rename PDFs as they appear in the folder.'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging.'
    )

    return parser


def report_plan(plan: RenamePlan, dry_run: bool) -> None:
    """Print the console line(s) for one processed file."""
    if plan.is_noop:
        print(f"⏺️  Unchanged: {plan.source.name}")
        return
    verb = "Would rename" if dry_run else "Renamed"
    print(f"✅ {verb}: {plan.source.name}")
    print(f"   -> {plan.target.name}")


def run_batch(config: RenameConfig) -> int:
    """Rename every PDF in the folder. Returns the process exit code."""
    batch = BatchRenamer(config)

    try:
        files = batch.find_files()
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    if not files:
        print(f"❌ No PDF files to process in {config.target_folder}")
        return 0

    prefix = "[DRY RUN] " if config.dry_run else ""
    print(f"{prefix}Processing {len(files)} files...")

    result = BatchResult(dry_run=config.dry_run)
    try:
        batch.run(files, on_plan=lambda plan: report_plan(plan, config.dry_run), result=result)
    except (RenamerError, OSError) as e:
        logger.debug("Batch aborted", exc_info=True)
        print(f"❌ Error: {e}")
        print(f"   Stopped after {result.total} of {len(files)} files.")
        return 1

    if config.dry_run:
        print(f"\n{prefix}Done: {result.planned} would be renamed, {result.unchanged} unchanged.")
    else:
        print(f"\nDone: {result.renamed} renamed, {result.unchanged} unchanged.")
    return 0


def run_watch(config: RenameConfig) -> int:
    """Watch the folder for new PDFs; returns once interrupted."""
    from app.watcher import FolderWatcher

    if not config.target_folder.is_dir():
        print(f"❌ Folder not found: {config.target_folder}")
        return 1

    print(f"👁️  Watching folder: {config.target_folder}")
    print("Press Ctrl+C to stop...")

    FolderWatcher(config).start()
    print("\n✅ Stopped watching.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argparser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Unset options fall through to the environment
    overrides = {
        "target_folder": args.folder,
        "client_name": args.client,
        "opponent_name": args.opponent,
        "default_case_number": args.case_number,
        "dry_run": args.dry_run,
    }

    try:
        config = RenameConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        parser.error(
            f"missing or invalid setting: {fields} "
            "(use --client/--opponent or CLIENT_NAME/OPPONENT_NAME)"
        )

    if args.watch:
        return run_watch(config)
    return run_batch(config)


if __name__ == "__main__":
    sys.exit(main())
