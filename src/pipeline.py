"""Query translation pipeline: raw text → intent → assembled SOQL → validated result.

`process` either returns a fully assembled and validated query or raises a typed error; partial
query text is never returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import monotonic

from src.app import App
from src.intent.extractor import extract_with_source
from src.intent.schema import ExtractionSource
from src.soql.builder import assemble
from src.soql.validator import ensure_valid

logger = logging.getLogger(__name__)


class QueryInputError(ValueError):
    """Raised when the raw query is empty or too long to process."""


@dataclass(frozen=True)
class ProcessResult:
    """The translated query and the metadata shown next to it."""

    object_name: str
    fields: tuple[str, ...]
    conditions: tuple[str, ...]
    query_text: str
    explanation: str
    source: ExtractionSource


def _check_input(raw_query: str, max_length: int) -> str:
    if not isinstance(raw_query, str) or not raw_query.strip():
        raise QueryInputError("Query is required and must be a non-empty string")
    if len(raw_query) > max_length:
        raise QueryInputError(f"Query exceeds maximum length of {max_length} characters")
    return raw_query.strip()


def process(raw_query: str, *, app: App) -> ProcessResult:
    """Translate a natural-language request into a validated SOQL query.

    Raises:
        QueryInputError: If the input is empty or exceeds the configured length.
        UnsupportedObjectError: If the resolved object is not in the schema catalog.
        ValidationError: If the assembled text fails a lexical check.
    """

    started = monotonic()
    query = _check_input(raw_query, app.settings.max_query_length)

    extracted = extract_with_source(query, lexicon=app.lexicon, llm_config=app.llm_config)
    assembled = assemble(extracted.intent, catalog=app.catalog)
    ensure_valid(assembled.text)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled source=%s object=%s conditions=%d latency_ms=%d",
        extracted.source,
        assembled.object_name,
        len(assembled.conditions),
        latency_ms,
    )

    return ProcessResult(
        object_name=assembled.object_name,
        fields=assembled.fields,
        conditions=assembled.conditions,
        query_text=assembled.text,
        explanation=extracted.intent.explanation,
        source=extracted.source,
    )
