"""
Data models for token usage aggregation.
Defines the additive usage counter, the decoded log record and the aggregation key.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import re
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Optional, Tuple

from usage_tally.conf import DATE_BUCKET_FORMAT

# (model, date bucket)
UsageKey = Tuple[str, str]

RFC3339_TIMESTAMP = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def _add_optional(first: Optional[int], second: Optional[int]) -> Optional[int]:
    if first is None:
        return second
    if second is None:
        return first
    return first + second


@dataclass(frozen=True)
class TokenUsage:
    """
    Token counts reported for one or more API responses.

    A field is None when no contributing record reported it, which is
    different from a reported count of zero.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    def merge(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            **{
                field.name: _add_optional(getattr(self, field.name), getattr(other, field.name))
                for field in fields(self)
            }
        )

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        if not isinstance(other, TokenUsage):
            return NotImplemented
        return self.merge(other)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, field.name) is None for field in fields(self))

    @property
    def total_tokens(self) -> int:
        return sum(getattr(self, field.name) or 0 for field in fields(self))


@dataclass(frozen=True)
class UsageRecord:
    """A single decoded log entry that names the model it was produced by."""

    model: str
    timestamp: str
    usage: Optional[TokenUsage] = None

    @property
    def date_bucket(self) -> str:
        return timestamp_to_date_bucket(self.timestamp)

    @property
    def key(self) -> UsageKey:
        return self.model, self.date_bucket


def timestamp_to_date_bucket(timestamp: str) -> str:
    """
    Truncate an RFC 3339 timestamp to its UTC calendar day.

    Timestamps that cannot be parsed, including ones without a UTC offset,
    are returned unchanged so that every record still gets a stable bucket.
    """
    match = RFC3339_TIMESTAMP.match(timestamp)
    if match is None:
        return timestamp

    date, time, fraction, offset = match.groups()
    # fromisoformat only accepts 3 or 6 fractional digits on older interpreters
    fraction = (fraction or "").ljust(6, "0")[:6]
    offset = "+00:00" if offset in ("Z", "z") else offset
    try:
        parsed = datetime.fromisoformat(f"{date}T{time}.{fraction}{offset}")
    except ValueError:
        return timestamp
    return parsed.astimezone(timezone.utc).strftime(DATE_BUCKET_FORMAT)
