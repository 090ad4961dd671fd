"""CLI entry point for the listings engine."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.core.config import Settings
from src.pipeline.orchestrator import (
    compute_statistics,
    export_filtered,
    export_report,
    filter_listings,
    total_jobs,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/settings.yaml"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Job listings engine - relevance filtering and market statistics",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG}; built-in defaults if missing)",
    )
    common.add_argument(
        "--output", "-o",
        help="Write JSON to this file instead of stdout",
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- filter subcommand ---
    filter_parser = subparsers.add_parser(
        "filter",
        parents=[common],
        help="Keep listings relevant to a keyword",
    )
    filter_parser.add_argument("--keyword", "-k", required=True, help="Search keyword")
    filter_parser.add_argument(
        "--format",
        action="store_true",
        help="Emit formatted listings (salary text, snippet, defaults)",
    )
    filter_parser.add_argument("input", help="JSON file: record list or provider response")

    # --- stats subcommand ---
    stats_parser = subparsers.add_parser(
        "stats",
        parents=[common],
        help="Aggregate statistics over one or more merged batches",
    )
    stats_parser.add_argument("--keyword", "-k", default="", help="Keyword echoed in output")
    stats_parser.add_argument(
        "--location", "-l",
        help="Location echoed in output (default: report.default_location)",
    )
    stats_parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        help="Reference time for the timeline (ISO 8601, default: current time)",
    )
    stats_parser.add_argument("inputs", nargs="+", help="JSON batch files")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def load_settings(path: str) -> Settings:
    """Load settings, using built-in defaults when the default file is absent."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        logger.debug("No %s found, using default settings", path)
        return Settings()
    return Settings.from_yaml(path)


def load_payload(path: str) -> Any:
    file = Path(path)
    if not file.exists():
        msg = f"Input file not found: {file}"
        raise FileNotFoundError(msg)
    return json.loads(file.read_text(encoding="utf-8"))


def run_filter(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    result = filter_listings(load_payload(args.input), args.keyword, settings)
    return export_filtered(result, settings.formatting if args.format else None)


def run_stats(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    payloads = [load_payload(p) for p in args.inputs]
    report = compute_statistics(payloads, settings, args.now)
    return {
        "success": True,
        "keyword": args.keyword,
        "location": args.location or settings.report.default_location,
        "totalJobs": total_jobs(payloads),
        "analyzedJobs": report.total_analyzed,
        "statistics": export_report(report),
    }


def write_output(data: dict[str, Any], output: str | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        print(text)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "filter":
            data = run_filter(args, settings)
        else:
            data = run_stats(args, settings)
    except (FileNotFoundError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    write_output(data, args.output)


if __name__ == "__main__":
    main()
