"""
Repository interface definitions for usage_tally.
Defines abstract base classes for discovering and reading session log files.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class LogRepository(ABC):
    """Abstract repository interface for session log storage."""

    @abstractmethod
    def list_log_files(self, root_dir: Path) -> List[Path]:
        """
        Find the candidate log files below a root directory.

        Only files inside the immediate subdirectories of the root are
        returned; files in the root itself or nested deeper are not.

        Args:
            root_dir: Directory holding one subdirectory per project

        Returns:
            Candidate files in no particular order, empty if the root
            cannot be read
        """

    @abstractmethod
    def read_text(self, file_path: Path) -> str:
        """
        Read a log file as UTF-8 text.

        Args:
            file_path: Path to the log file

        Returns:
            Decoded file contents

        Raises:
            FileOperationError: If the file cannot be read or is not valid UTF-8
        """
