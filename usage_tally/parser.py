"""
Parsing of session log file contents.
Detects whether a file holds JSON Lines or a single JSON document and yields
the raw JSON values it contains, skipping anything that does not parse.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import json
from pathlib import Path
from typing import Any, Iterator, List, Optional

from usage_tally.conf import LOG_FILE_SUFFIXES

_UNPARSED = object()


def is_log_file(path: Path) -> bool:
    return path.suffix in LOG_FILE_SUFFIXES


def _split_lines(content: str) -> List[str]:
    return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]


def _try_parse(text: str) -> Any:
    try:
        return json.loads(text)
    # nesting too deep for the decoder counts as malformed
    except (ValueError, RecursionError):
        return _UNPARSED


def _first_non_blank(lines: List[str]) -> Optional[str]:
    return next((line for line in lines if line.strip()), None)


def iter_json_values(content: str) -> Iterator[Any]:
    """
    Yield the JSON values found in a log file's text.

    If the first non-blank line is a complete JSON value the content is
    treated as JSON Lines and every line is parsed on its own. Otherwise the
    whole content is parsed as one document. Lines or documents that fail to
    parse contribute nothing.
    """
    lines = _split_lines(content)
    first_line = _first_non_blank(lines)
    if first_line is None:
        return

    if _try_parse(first_line) is _UNPARSED:
        document = _try_parse(content)
        if document is not _UNPARSED:
            yield document
        return

    for line in lines:
        if not line.strip():
            continue
        value = _try_parse(line)
        if value is not _UNPARSED:
            yield value
