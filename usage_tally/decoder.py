"""
Decoding of raw JSON values into normalized usage records.
Values that do not have the shape of a session log entry decode to None.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

from typing import Any, Dict, Optional

from usage_tally.models.token_usage import TokenUsage, UsageRecord

USAGE_FIELDS = (
    "input_tokens",
    "output_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
)


class _ShapeMismatch(Exception):
    pass


def _optional_string(container: Dict[str, Any], name: str) -> Optional[str]:
    value = container.get(name)
    if value is not None and not isinstance(value, str):
        raise _ShapeMismatch(name)
    return value


def _optional_count(container: Dict[str, Any], name: str) -> Optional[int]:
    value = container.get(name)
    if value is None:
        return None
    # bool is a subclass of int but never a valid token count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _ShapeMismatch(name)
    return value


def _decode_usage(value: Any) -> Optional[TokenUsage]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise _ShapeMismatch("usage")
    usage = TokenUsage(**{name: _optional_count(value, name) for name in USAGE_FIELDS})
    return None if usage.is_empty else usage


def _decode(value: Any) -> Optional[UsageRecord]:
    if not isinstance(value, dict):
        raise _ShapeMismatch("entry")

    timestamp = value.get("timestamp")
    if not isinstance(timestamp, str):
        raise _ShapeMismatch("timestamp")

    message = value.get("message")
    if not isinstance(message, dict):
        raise _ShapeMismatch("message")

    model = _optional_string(message, "model")
    usage = _decode_usage(message.get("usage"))
    if not model:
        return None
    return UsageRecord(model=model, timestamp=timestamp, usage=usage)


def decode_record(value: Any) -> Optional[UsageRecord]:
    """
    Interpret a raw JSON value as a session log entry.

    Returns None when the value is not shaped like a log entry or when its
    message does not name a model.
    """
    try:
        return _decode(value)
    except _ShapeMismatch:
        return None
