"""
Repositories package for usage_tally.
Contains repository interfaces and implementations for session log access.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from usage_tally.repositories.interfaces import LogRepository
from usage_tally.repositories.local_log_repository import LocalLogRepository

__all__ = [
    "LogRepository",
    "LocalLogRepository",
]
