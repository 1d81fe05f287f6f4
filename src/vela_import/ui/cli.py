from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from vela_import.app import run_import
from vela_import.config import (
    ConfigurationError,
    configure_logging,
    get_import_config,
    parse_fatal_policy,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from vela_import.config import ImportConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import VeLA survey spreadsheets")
    subparsers = parser.add_subparsers(dest="command", required=True)

    importer = subparsers.add_parser("import", help="Import a JSON-lines region file")
    importer.add_argument(
        "regions",
        type=Path,
        help="JSON-lines file with one tagged row group per line",
    )
    importer.add_argument(
        "--output",
        type=Path,
        help="Destination JSON-lines file for the records (default: <regions>.records.jsonl)",
    )
    importer.add_argument(
        "--thesauri",
        type=Path,
        help="Thesauri JSON file (defaults to VELA_THESAURI_PATH or Assets/Thesauri.json)",
    )
    importer.add_argument(
        "--on-fatal",
        type=str,
        help="What to do when a row fails fatally: abort or skip-row (defaults to config)",
    )
    importer.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at DEBUG level",
    )

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> ImportConfig:
    config = get_import_config()
    if args.thesauri is not None:
        config = replace(config, thesauri_path=args.thesauri)
    if args.on_fatal is not None:
        config = replace(config, on_fatal=parse_fatal_policy(args.on_fatal))
    if args.verbose:
        config = replace(config, log_level=logging.DEBUG)
    return config


def _default_output(regions: Path) -> Path:
    return regions.with_name(f"{regions.stem}.records.jsonl")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = _build_config(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=config.log_level, force=True)

    try:
        if parsed_args.command == "import":
            output = parsed_args.output or _default_output(parsed_args.regions)
            result = run_import(parsed_args.regions, output, config=config)
            log.info(
                "Import finished: records=%s, skipped_rows=%s",
                result.records,
                result.skipped_rows,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env`` and install the SIGINT handler."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
