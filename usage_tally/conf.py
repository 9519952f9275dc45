"""
Configuration constants for locating and reading session logs.
Defines the default log root, eligible file types and date bucket format.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from pathlib import Path

# --- Configuration ---
# Session logs are stored one directory per project below this root
DEFAULT_PROJECTS_DIR = Path.home() / ".claude" / "projects"

# Only these file types are parsed, everything else is ignored
LOG_FILE_SUFFIXES = (".json", ".jsonl")

DATE_BUCKET_FORMAT = "%Y-%m-%d"

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
