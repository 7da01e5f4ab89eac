"""Command line interface for kodic"""

import argparse
import sys
from pathlib import Path

from .config.settings import AppSettings, settings
from .core.constants import CacheConstants
from .core.container import setup_default_container
from .core.factory import create_watcher
from .core.input_validator import InputValidator
from .core.interfaces import DefinitionCacheInterface
from .core.watcher import ClipboardWatcher
from .exceptions import KodicError, WordValidationError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(
        prog="kodic",
        description="Show English-Korean definitions for words copied to the clipboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kodic                          # Watch the clipboard until interrupted
  kodic --interval 1             # Poll once per second
  kodic --lookup serendipity     # Look up words once and print them
  kodic --history --limit 10     # Show the ten most recent lookups
        """,
    )

    watch_group = parser.add_argument_group("watch options")
    watch_group.add_argument(
        "--interval",
        type=float,
        default=None,
        help=(
            "Seconds to sleep between clipboard polls "
            f"(default: {settings.clipboard.poll_interval})"
        ),
    )
    watch_group.add_argument(
        "--no-notify", action="store_true", help="Do not show desktop notifications"
    )

    cache_group = parser.add_argument_group("cache options")
    cache_group.add_argument(
        "--no-cache", action="store_true", help="Do not remember lookups on disk"
    )
    cache_group.add_argument(
        "--db",
        type=Path,
        default=None,
        help=f"Definition store file (default: {settings.cache.db_path})",
    )

    action_group = parser.add_argument_group("actions")
    action_group.add_argument(
        "--lookup",
        nargs="+",
        metavar="WORD",
        help="Look up WORD(s) once, print the definitions and exit",
    )
    action_group.add_argument(
        "--history", action="store_true", help="List remembered lookups and exit"
    )
    action_group.add_argument(
        "--limit",
        type=int,
        default=CacheConstants.DEFAULT_HISTORY_LIMIT,
        help=(
            "Maximum number of entries listed by --history "
            f"(default: {CacheConstants.DEFAULT_HISTORY_LIMIT})"
        ),
    )
    action_group.add_argument(
        "--cache-stats", action="store_true", help="Show cache statistics and exit"
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Echo log records to stdout"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument(
        "--log-file",
        type=Path,
        help=f"Append logs to this file (default: {settings.logging.file})",
    )

    return parser


def apply_overrides(args: argparse.Namespace, base: AppSettings) -> AppSettings:
    """Return a copy of the settings with command line overrides applied"""
    cfg = base.model_copy(deep=True)
    if args.interval is not None:
        cfg.clipboard.poll_interval = args.interval
    if args.no_cache:
        cfg.cache.enable_cache = False
    if args.db is not None:
        cfg.cache.db_path = args.db
    if args.no_notify:
        cfg.notification.enable = False
    if args.log_file is not None:
        cfg.logging.file = args.log_file
    if args.debug:
        cfg.logging.level = "DEBUG"
    return cfg


def lookup_words(watcher: ClipboardWatcher, words: list[str]) -> int:
    """Print definitions for the given words, returning the number of failures"""
    failed = 0
    for word in words:
        try:
            term = InputValidator.clean_word(word)
        except WordValidationError as e:
            print(f"❌ {word}: {e.reason}")
            failed += 1
            continue

        definition = watcher.lookup(term)
        if definition is None:
            print(f"❌ {term}: no definition found")
            failed += 1
        else:
            print(f"{term}: {definition.rstrip()}")
    return failed


def show_history(cache: DefinitionCacheInterface, limit: int | None) -> None:
    """Print remembered lookups, newest first"""
    entries = cache.history(limit)
    if not entries:
        print("No remembered lookups.")
        return
    for entry in entries:
        mark = "✔" if entry.reviewed else " "
        stamp = entry.created_at.strftime("%Y-%m-%d %H:%M")
        print(f"[{mark}] {stamp}  {entry.term}: {entry.definition.rstrip()}")


def show_cache_stats(cache: DefinitionCacheInterface) -> None:
    """Show cache statistics"""
    stats = cache.get_stats()
    print("\n📊 CACHE STATISTICS")
    print("=" * 40)
    print(f"Total entries: {stats.total_entries}")
    print(f"Reviewed entries: {stats.reviewed_entries}")
    print("=" * 40)


def run(args: argparse.Namespace, cfg: AppSettings) -> int:
    """Build the watcher and perform the requested action"""
    container = setup_default_container(cfg)
    watcher = create_watcher(container, poll_interval=cfg.clipboard.poll_interval)
    try:
        if args.history:
            show_history(watcher.cache, args.limit)
            return 0
        if args.cache_stats:
            show_cache_stats(watcher.cache)
            return 0
        if args.lookup:
            return 1 if lookup_words(watcher, args.lookup) else 0

        watcher.run_forever()
        return 0
    finally:
        watcher.close()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.interval is not None and args.interval <= 0:
        parser.error("--interval must be positive")
    if args.limit <= 0:
        parser.error("--limit must be positive")

    cfg = apply_overrides(args, settings)

    # Resource initialization failures are fatal
    try:
        cfg.create_directories()
        setup_logging(
            cfg.logging.level,
            str(cfg.logging.file),
            console=args.verbose or args.debug,
            fmt=cfg.logging.format,
        )
    except OSError as e:
        print(f"Cannot initialize kodic: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        logger.debug("kodic started")
        sys.exit(run(args, cfg))
    except KodicError as e:
        logger.error(f"Application error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
