"""Recovery of JSON payloads from free-text model output.

Listing extraction runs an ordered chain of pure strategies over the
model reply; the first one that yields parseable JSON wins. When none
does, the reply is kept verbatim as an opaque record instead of failing
the request.
"""

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..errors import MalformedModelOutput

logger = logging.getLogger(__name__)

RAW_DATA_FIELD = "rawData"

_FENCED_JSON_RE = re.compile(r"```json\n?([\s\S]*?)\n?```")
_BRACKETED_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

_MISSING = object()


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return _MISSING


def from_fenced_block(text: str) -> Any:
    """Parse the interior of a ```json fenced block."""
    match = _FENCED_JSON_RE.search(text)
    if not match:
        return _MISSING
    return _loads(match.group(1))


def from_bracketed_array(text: str) -> Any:
    """Parse the greedy span from the first '[' to the last ']'."""
    match = _BRACKETED_ARRAY_RE.search(text)
    if not match:
        return _MISSING
    return _loads(match.group(0))


def from_whole_text(text: str) -> Any:
    """Parse the reply as a JSON document.

    Runs before the bracket scan so an object holding a nested array is not
    reduced to that array. The two agree whenever the reply has surrounding prose.
    """
    return _loads(text)


RECOVERY_STRATEGIES: tuple[Callable[[str], Any], ...] = (
    from_fenced_block,
    from_whole_text,
    from_bracketed_array,
)


# ── Tagged results ────────────────────────────────────────────────────


@dataclass(frozen=True)
class StructuredListings:
    records: list[dict]

    def to_records(self) -> list[dict]:
        return list(self.records)


@dataclass(frozen=True)
class UnstructuredListings:
    raw_text: str

    def to_records(self) -> list[dict]:
        return [{RAW_DATA_FIELD: self.raw_text}]


ListingsResult = StructuredListings | UnstructuredListings


def _as_text(item: Any) -> str:
    return item if isinstance(item, str) else json.dumps(item)


def _as_records(parsed: Any) -> list[dict] | None:
    """Shape a parsed JSON value into a list of records, or None if it has no usable shape."""
    if isinstance(parsed, dict):
        jobs = parsed.get("jobs")
        if isinstance(jobs, list):
            parsed = jobs
        else:
            return [parsed]
    if not isinstance(parsed, list):
        return None
    return [item if isinstance(item, dict) else {RAW_DATA_FIELD: _as_text(item)} for item in parsed]


def recover_listings(text: str) -> ListingsResult:
    """Turn a model reply into job records. Never raises."""
    for strategy in RECOVERY_STRATEGIES:
        parsed = strategy(text)
        if parsed is _MISSING:
            continue
        records = _as_records(parsed)
        if records is not None:
            logger.debug("Listings recovered by %s: %d records", strategy.__name__, len(records))
            return StructuredListings(records)

    logger.warning("No JSON found in extraction output (len=%d, first_100=%r)", len(text), text[:100])
    return UnstructuredListings(text)


# ── Strict JSON-mode parsing ──────────────────────────────────────────


def _strip_markdown_wrapper(text: str) -> str:
    """Remove markdown code block wrappers (```json ... ``` or ``` ... ```)."""
    text = text.strip()
    if text.startswith("```"):
        # Remove opening line (```json or ```)
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        # Remove closing ```
        if "```" in text:
            text = text.rsplit("```", 1)[0]
        text = text.strip()
    return text


def parse_json_mode(text: str) -> Any:
    """Parse a reply requested in JSON mode. No fallback: failure is fatal."""
    parsed = _loads(_strip_markdown_wrapper(text))
    if parsed is _MISSING:
        logger.warning("JSON-mode parse failed (len=%d, first_100=%r)", len(text), text[:100])
        raise MalformedModelOutput()
    return parsed
