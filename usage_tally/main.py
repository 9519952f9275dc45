"""
Command line interface for usage_tally.
Aggregates token usage from local session logs and prints it as a table,
one row per model and day.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import argparse
import logging
import sys
from pathlib import Path

from usage_tally.builders import create_usage_aggregator
from usage_tally.conf import VALID_LOG_LEVELS
from usage_tally.config import ConfigManager
from usage_tally.exceptions import ConfigurationError
from usage_tally.renderer import render_usage_table


def parse_command_line() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Summarize token usage from local session logs by model and day."
    )
    parser.add_argument(
        "--projects-dir",
        type=Path,
        help="Directory containing one subdirectory of session logs per project "
        "(defaults to CLAUDE_PROJECTS_DIR or ~/.claude/projects).",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        help="Number of worker threads used to read log files "
        "(defaults to MAX_WORKERS or the thread pool default).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Logging verbosity (defaults to LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--short-names",
        action="store_true",
        help="Display shortened model names, e.g. sonnet-4 instead of "
        "claude-sonnet-4-20250514.",
    )

    args = parser.parse_args()

    if args.max_workers is not None and args.max_workers < 1:
        parser.error("--max-workers must be a positive integer")

    return args


def main() -> int:
    args = parse_command_line()
    try:
        config = ConfigManager.get_config()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.WARNING)
        logging.error("Invalid configuration: %s", e)
        return 1

    logging.basicConfig(level=args.log_level or config.log_level)

    projects_dir = args.projects_dir or config.projects_dir
    aggregator = create_usage_aggregator(args.max_workers)
    usage_data = aggregator.process(projects_dir)

    render_usage_table(usage_data, short_names=args.short_names)
    return 0


if __name__ == "__main__":
    sys.exit(main())
