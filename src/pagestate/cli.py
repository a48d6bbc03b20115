"""
Command-line interface for pagestate.

Provides commands to:
- Collect a page's editable regions and save them
- Restore saved state into a page
- Inspect or clear the stored document
"""

import argparse
import json
import logging
import sys

from .config import Settings
from .errors import PageStateError
from .manager import DataManager
from .page import EditablePage
from .percent import format_percentage
from .store import create_store
from .types.record import ListRecord, NumericGaugeRecord, Snapshot, snapshot_to_document


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger(__name__)


def summarize(snapshot: Snapshot) -> dict:
    summary = {}
    for key, record in snapshot.items():
        if isinstance(record, ListRecord):
            summary[key] = ("list", f"{len(record.items)} items")
        elif isinstance(record, NumericGaugeRecord):
            summary[key] = ("number", f"{record.display_text} ({format_percentage(record.percentage)}%)")
        else:
            summary[key] = ("html", f"{len(record.html)} chars")
    return summary


# ============================================================================
# Commands
# ============================================================================

def cmd_collect(manager: DataManager, args: argparse.Namespace) -> None:
    """Collect a page's regions and save them."""
    page = EditablePage.from_file(args.page, selector=args.selector)
    regions = page.regions()

    # Compare against what is stored so an unchanged page is not rewritten
    manager.load()
    snapshot = manager.collect_snapshot(regions)
    if manager.save(snapshot):
        print(f"Saved {len(snapshot)} regions to '{manager.gateway.storage_key}'")
    else:
        print("No changes to save")


def cmd_restore(manager: DataManager, args: argparse.Namespace) -> None:
    """Restore saved state into a page."""
    page = EditablePage.from_file(args.page, selector=args.selector)
    regions = page.regions()

    snapshot = manager.load()
    if snapshot:
        restored = manager.restore_snapshot(regions, snapshot)
        logging.getLogger(__name__).info(f"Restored {restored} of {len(regions)} regions")
    manager.initialize_numeric_regions(regions)

    if args.output:
        page.write(args.output)
        print(f"Wrote {args.output}")
    else:
        print(page.render())


def cmd_show(manager: DataManager, args: argparse.Namespace) -> None:
    """Print the stored document."""
    snapshot = manager.load()
    if snapshot is None:
        print(f"Nothing stored under '{manager.gateway.storage_key}'")
        return

    if args.format == "json":
        print(json.dumps(snapshot_to_document(snapshot), indent=2, ensure_ascii=False))
        return

    print(f"\n{'Key':<60} {'Type':<8} {'Content'}")
    print("-" * 100)
    for key, (kind, content) in summarize(snapshot).items():
        print(f"{key[:58]:<60} {kind:<8} {content}")
    print(f"\nTotal: {len(snapshot)} records, fingerprint {manager.gateway.last_fingerprint}")


def cmd_fingerprint(manager: DataManager, args: argparse.Namespace) -> None:
    """Print the fingerprint of a page's current snapshot."""
    page = EditablePage.from_file(args.page, selector=args.selector)
    snapshot = manager.collect_snapshot(page.regions())
    print(manager.gateway.hasher.fingerprint(snapshot_to_document(snapshot)))


def cmd_clear(manager: DataManager, args: argparse.Namespace) -> None:
    """Delete the stored document."""
    manager.gateway.clear()
    print(f"Cleared '{manager.gateway.storage_key}'")


def create_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pagestate",
        description="Save and restore editable regions of an HTML page",
    )
    parser.add_argument(
        "--store-url",
        default=settings.store_url,
        help=f"Store URL, SQLAlchemy URL or memory:// (default: {settings.store_url})",
    )
    parser.add_argument(
        "--storage-key",
        default=settings.storage_key,
        help=f"Key the snapshot is stored under (default: {settings.storage_key})",
    )
    parser.add_argument(
        "--selector",
        default=settings.editable_selector,
        help="CSS selector for editable regions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=settings.debug, help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    collect = subparsers.add_parser("collect", help="Collect and save a page's regions")
    collect.add_argument("page", help="HTML file")

    restore = subparsers.add_parser("restore", help="Restore saved state into a page")
    restore.add_argument("page", help="HTML file")
    restore.add_argument("-o", "--output", help="Output file (default: stdout)")

    show = subparsers.add_parser("show", help="Show the stored document")
    show.add_argument("--format", choices=["table", "json"], default="table")

    fp = subparsers.add_parser("fingerprint", help="Fingerprint a page's snapshot")
    fp.add_argument("page", help="HTML file")

    subparsers.add_parser("clear", help="Delete the stored document")

    return parser


def main(argv=None) -> None:
    """Main entry point for the pagestate CLI."""
    settings = Settings.from_env()
    parser = create_parser(settings)
    args = parser.parse_args(argv)

    logger = setup_logging(args.verbose)

    commands = {
        "collect": cmd_collect,
        "restore": cmd_restore,
        "show": cmd_show,
        "fingerprint": cmd_fingerprint,
        "clear": cmd_clear,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    try:
        manager = DataManager(create_store(args.store_url), storage_key=args.storage_key)
        handler(manager, args)
    except (PageStateError, OSError) as e:
        logger.error(f"Command failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
