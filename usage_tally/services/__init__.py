"""
Services package for usage_tally.
Contains the usage aggregation service.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from usage_tally.services.usage_aggregator import AggregationTable, UsageAggregator, UsageRow

__all__ = [
    "AggregationTable",
    "UsageAggregator",
    "UsageRow",
]
