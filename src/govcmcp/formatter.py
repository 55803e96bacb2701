"""
Output formatting for LLM consumption.

Results are encoded as TOON (Token-Oriented Object Notation), which drops
most of JSON's repeated keys and punctuation. TOON cannot represent every
shape; when encoding fails the value is rendered as indented JSON instead.
Correctness over compactness: the fallback never loses data.
"""

import json
import logging
from typing import Any

from toon import encode

from govcmcp.types import ExecutionOutcome, FailedOutcome, StructuredOutcome

logger = logging.getLogger(__name__)


def to_json(data: Any) -> str:
    """Indented JSON; objects JSON cannot represent are rendered with str()."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def format_for_llm(data: Any) -> str:
    """
    Format an arbitrary value for LLM consumption.

    1. TOON encoding (compact, schema-aware).
    2. Indented JSON if TOON raises for this value.
    """
    try:
        return encode(data)
    except Exception as e:
        logger.debug(f"TOON encoding failed ({type(e).__name__}: {e}), falling back to JSON")
        return to_json(data)


def format_outcome(outcome: ExecutionOutcome) -> str:
    """Render an execution outcome as the text returned to the agent."""
    if isinstance(outcome, FailedOutcome):
        text = f"Error (exit code {outcome.exit_code}): {outcome.error}"
        if outcome.text:
            text += f"\n\n{outcome.text}"
        return text

    if isinstance(outcome, StructuredOutcome):
        return format_for_llm(outcome.data)

    return outcome.text or f"Command completed with exit code {outcome.exit_code}."
