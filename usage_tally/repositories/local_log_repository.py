"""
Local filesystem implementation of the log repository.
Scans the project directories below a root and reads log files from disk.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from usage_tally.exceptions import FileOperationError
from usage_tally.repositories.interfaces import LogRepository


class LocalLogRepository(LogRepository):
    """Reads session logs laid out as root/<project>/<log file>."""

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self.max_workers = max_workers

    def list_log_files(self, root_dir: Path) -> List[Path]:
        if not root_dir.exists():
            logging.warning("Directory %s does not exist", root_dir)
            return []

        try:
            subdirs = [path for path in root_dir.iterdir() if path.is_dir()]
        except OSError as e:
            logging.error("Failed to read directory %s: %s", root_dir, e)
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            listings = list(executor.map(self._list_files, subdirs))

        files = [path for listing in listings for path in listing]
        logging.debug("Found %d files in %d directories below %s",
                      len(files), len(subdirs), root_dir)
        return files

    def _list_files(self, subdir: Path) -> List[Path]:
        try:
            return [path for path in subdir.iterdir() if path.is_file()]
        except OSError as e:
            logging.warning("Skipping unreadable directory %s: %s", subdir, e)
            return []

    def read_text(self, file_path: Path) -> str:
        try:
            return file_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError(
                f"Failed to read log file: {e}",
                file_path=str(file_path),
                operation="read",
            ) from e
