"""
Simple builder functions for wiring the aggregation pipeline.
Provides direct instantiation with clear dependencies.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import logging
from typing import Optional

from usage_tally.config import ConfigManager
from usage_tally.repositories.interfaces import LogRepository
from usage_tally.services.usage_aggregator import UsageAggregator


def create_log_repository(max_workers: Optional[int] = None) -> LogRepository:
    """Create the log repository reading from the local filesystem."""
    from usage_tally.repositories.local_log_repository import LocalLogRepository

    config = ConfigManager.get_config()
    return LocalLogRepository(max_workers=max_workers or config.max_workers)


def create_usage_aggregator(max_workers: Optional[int] = None) -> UsageAggregator:
    """Create a usage aggregator backed by the configured log repository."""
    config = ConfigManager.get_config()
    workers = max_workers or config.max_workers
    logging.debug("Creating UsageAggregator with max_workers=%s", workers)
    return UsageAggregator(create_log_repository(workers), max_workers=workers)
