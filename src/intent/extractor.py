"""Intent extraction (language model optional; keyword rules as fallback).

Strategy:
    1) If the gateway is configured, ask the model for intent JSON and validate it.
    2) If the reply holds no usable JSON, scrape object and field names out of the prose
       (degraded confidence).
    3) If the gateway is disabled or fails, build the intent from keyword rules alone.
In every case the keyword condition scans are appended to whatever conditions the model gave.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

from pydantic import ValidationError

from src.intent.lexicon import Lexicon
from src.intent.llm_gateway import GatewayError, LLMConfig, complete
from src.intent.rules import DEFAULT_OBJECT, fallback_intent, scan_conditions
from src.intent.schema import ExtractionSource, Intent, ModelOutput, model_output_from_obj

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_PROSE_OBJECT_RE = re.compile(
    r"\b(Accounts?|Contacts?|Leads?|Opportunit(?:y|ies)|Cases?|Tasks?|Events?)\b",
    flags=re.IGNORECASE,
)
_PROSE_FIELDS: tuple[str, ...] = (
    "Id", "Name", "CreatedDate", "Industry", "Amount", "StageName", "Status", "Email", "Phone",
)
_PROSE_FIELD_RE = re.compile(r"\b(" + "|".join(_PROSE_FIELDS) + r")\b", flags=re.IGNORECASE)
_PROSE_FIELD_CANONICAL = {f.lower(): f for f in _PROSE_FIELDS}


@dataclass(frozen=True)
class ExtractResult:
    """Extracted intent plus information about which branch produced it."""

    intent: Intent
    source: ExtractionSource


def _structured_output(content: str) -> ModelOutput | None:
    match = _JSON_OBJECT_RE.search(content or "")
    if not match:
        return None
    try:
        decoded = json.loads(match.group(0))
        if not isinstance(decoded, dict):
            return None
        return model_output_from_obj(decoded)
    except (json.JSONDecodeError, ValidationError):
        return None


def _prose_output(content: str, raw_query: str) -> ModelOutput:
    object_match = _PROSE_OBJECT_RE.search(content or "")

    fields: list[str] = []
    for match in _PROSE_FIELD_RE.finditer(content or ""):
        name = _PROSE_FIELD_CANONICAL[match.group(1).lower()]
        if name not in fields:
            fields.append(name)

    return ModelOutput(
        object=object_match.group(1) if object_match else None,
        fields=fields or ["Id", "Name"],
        conditions=[],
        explanation=f"Interpreted from an unstructured model reply: {raw_query.strip()}",
    )


def parse_model_response(content: str, raw_query: str) -> tuple[ModelOutput, ExtractionSource]:
    """Turn the model's raw reply into a ModelOutput.

    Returns the structured JSON when present and valid, otherwise a best-effort scrape of the
    prose flagged as `llm_text`.
    """

    structured = _structured_output(content)
    if structured is not None:
        return structured, ExtractionSource.llm
    return _prose_output(content, raw_query), ExtractionSource.llm_text


def intent_from_model_output(output: ModelOutput, raw_query: str, *, lexicon: Lexicon) -> Intent:
    """Base Intent from a model reply; the object name is canonicalized through the lexicon."""

    object_name = lexicon.resolve(output.object) if output.object else DEFAULT_OBJECT
    return Intent(
        object_name=object_name,
        fields=[f for f in output.fields if f],
        conditions=list(output.conditions),
        explanation=output.explanation or f"Generated query for: {raw_query.strip()}",
    )


def extract(raw_query: str, model_output: ModelOutput | None, *, lexicon: Lexicon) -> Intent:
    """Derive the Intent for `raw_query`, optionally seeded by a model reply.

    Model conditions come first, then keyword-derived conditions; duplicates are left for the
    assembler to remove. Never raises for lack of matches.
    """

    if model_output is not None:
        base = intent_from_model_output(model_output, raw_query, lexicon=lexicon)
    else:
        base = fallback_intent(raw_query)

    derived = scan_conditions(raw_query, base.object_name)
    return base.model_copy(update={"conditions": [*base.conditions, *derived]})


def extract_with_source(
        raw_query: str,
        *,
        lexicon: Lexicon,
        llm_config: LLMConfig | None,
) -> ExtractResult:
    """Run the gateway (if configured) and the extractor, reporting the branch used."""

    if llm_config is not None:
        try:
            content = complete(raw_query, config=llm_config)
            output, source = parse_model_response(content, raw_query)
            return ExtractResult(
                intent=extract(raw_query, output, lexicon=lexicon),
                source=source,
            )
        except GatewayError as exc:
            # Gateway failure is a degraded mode, not a request failure.
            logger.warning("gateway unavailable, using keyword rules: %s", exc)

    return ExtractResult(
        intent=extract(raw_query, None, lexicon=lexicon),
        source=ExtractionSource.rules,
    )
