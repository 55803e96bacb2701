"""
Output interpretation.

govc does not support -json for every command, and some commands that
accept it still print plain text. A parse failure is therefore never an
error: the trimmed text is carried forward instead.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


class _NotParsed:
    """Marker for 'no structured value'; distinct from a parsed JSON null."""

    def __repr__(self) -> str:
        return "NOT_PARSED"


NOT_PARSED = _NotParsed()


def interpret_output(stdout: str, wants_json: bool) -> tuple[Any, str | None]:
    """
    Interpret captured stdout.

    Returns (data, text): data is the parsed JSON document or NOT_PARSED;
    text is the trimmed stdout (None when empty) and is only meaningful
    when data is NOT_PARSED.
    """
    raw = stdout.strip()
    if not raw:
        return NOT_PARSED, None

    if wants_json:
        try:
            return json.loads(raw), None
        except ValueError:
            logger.debug("stdout is not JSON, returning raw text")

    return NOT_PARSED, raw
