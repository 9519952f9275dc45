"""
Aggregation of token usage across session log files.
Processes files concurrently and folds every decoded record into a shared
table keyed by model and calendar day.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from usage_tally.decoder import decode_record
from usage_tally.exceptions import FileOperationError
from usage_tally.models.token_usage import TokenUsage, UsageKey, UsageRecord
from usage_tally.parser import is_log_file, iter_json_values
from usage_tally.repositories.interfaces import LogRepository

UsageRow = Tuple[UsageKey, TokenUsage]


class AggregationTable:
    """Thread-safe mapping from (model, date) to accumulated usage."""

    def __init__(self) -> None:
        self._entries: Dict[UsageKey, TokenUsage] = {}
        self._lock = threading.Lock()

    def merge(self, key: UsageKey, usage: Optional[TokenUsage]) -> None:
        usage = usage or TokenUsage()
        with self._lock:
            existing = self._entries.get(key)
            self._entries[key] = usage if existing is None else existing.merge(usage)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def sorted_items(self) -> List[UsageRow]:
        with self._lock:
            return sorted(self._entries.items(), key=lambda item: item[0])


class UsageAggregator:
    """Collects per model, per day token usage from a directory of session logs."""

    def __init__(self, repository: LogRepository, max_workers: Optional[int] = None) -> None:
        self.repository = repository
        self.max_workers = max_workers

    def process(self, root_dir: Path) -> List[UsageRow]:
        """
        Aggregate all session logs below a root directory.

        Args:
            root_dir: Directory holding one subdirectory per project

        Returns:
            ((model, date), usage) pairs sorted by model, then date
        """
        table = AggregationTable()
        files = [path for path in self.repository.list_log_files(root_dir) if is_log_file(path)]
        logging.info("Processing %d log files below %s", len(files), root_dir)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # consume the iterator so worker exceptions are re-raised here
            record_counts = list(executor.map(lambda path: self._process_file(path, table), files))

        logging.info("Aggregated %d records into %d entries",
                     sum(record_counts), len(table))
        return table.sorted_items()

    def _process_file(self, file_path: Path, table: AggregationTable) -> int:
        try:
            content = self.repository.read_text(file_path)
        except FileOperationError as e:
            logging.warning("Skipping %s", e)
            return 0

        count = 0
        for record in self.read_records(content):
            table.merge(record.key, record.usage)
            count += 1
        logging.debug("Read %d records from %s", count, file_path)
        return count

    @staticmethod
    def read_records(content: str) -> Iterator[UsageRecord]:
        for value in iter_json_values(content):
            record = decode_record(value)
            if record is not None:
                yield record
