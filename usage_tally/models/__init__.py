"""
Data models for usage_tally.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from usage_tally.models.token_usage import (TokenUsage, UsageRecord, UsageKey,
                                            timestamp_to_date_bucket)

__all__ = ["TokenUsage", "UsageRecord", "UsageKey", "timestamp_to_date_bucket"]
