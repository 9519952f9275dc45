"""
Shared utility functions for usage_tally.
Provides number and model name formatting for display.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import re
from typing import Optional

MODEL_DATE_SUFFIX = re.compile(r"-\d{8}$")


def format_token_count(count: Optional[int]) -> str:
    count = count or 0
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(count)


def simplify_model_name(model: str) -> str:
    """Drop the vendor prefix and release date, e.g. claude-sonnet-4-20250514 -> sonnet-4."""
    if model.startswith("claude-"):
        model = model[len("claude-"):]
    return MODEL_DATE_SUFFIX.sub("", model)
