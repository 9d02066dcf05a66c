"""Keyword rules for object selection and WHERE predicate derivation.

These rules run on every request: they pick the object when the language model is unavailable and
add predicates for a handful of business phrases whether or not the model answered. They are
deterministic and never fail; no match means no predicate.
"""

from __future__ import annotations

from src.intent import dates
from src.intent.normalize import contains_phrase, normalize_text
from src.intent.schema import Intent

DEFAULT_OBJECT = "Account"

# Checked in order; the first group with a keyword contained in the query wins.
OBJECT_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("contact", "person"), "Contact"),
    (("lead",), "Lead"),
    (("opportunity", "deal"), "Opportunity"),
    (("case", "support"), "Case"),
)

STATUS_PHRASES: tuple[str, ...] = ("active", "open")
VALUE_PHRASES: tuple[str, ...] = ("high revenue", "high revenues", "high value", "high valued")
INDUSTRY_PHRASES: tuple[str, ...] = ("technology", "technologies", "tech")

STATUS_PREDICATES: dict[str, str] = {
    "Account": "Active__c = true",
    "Opportunity": "IsClosed = false",
    "Case": "Status != 'Closed'",
}

VALUE_PREDICATES: dict[str, str] = {
    "Opportunity": "Amount > 100000",
    "Account": "AnnualRevenue > 1000000",
}

INDUSTRY_PREDICATES: dict[str, str] = {
    "Account": "Industry = 'Technology'",
}


def _has_any_phrase(text: str, phrases: tuple[str, ...]) -> bool:
    return any(contains_phrase(text, phrase) for phrase in phrases)


def detect_object(text: str) -> str:
    """Pick the object a query is about by keyword; defaults to `Account`."""

    value = normalize_text(text)
    for keywords, object_name in OBJECT_KEYWORDS:
        if any(keyword in value for keyword in keywords):
            return object_name
    return DEFAULT_OBJECT


def scan_conditions(text: str, object_name: str) -> list[str]:
    """Derive WHERE predicates from business phrases in the query.

    The time window is exclusive (first matching period wins); the status, value and industry
    scans are independent and each contributes at most one predicate.
    """

    normalized = normalize_text(text)
    conditions: list[str] = []

    date_clause = dates.date_predicate(normalized, raw_text=text)
    if date_clause is not None:
        conditions.append(date_clause)

    if _has_any_phrase(normalized, STATUS_PHRASES) and object_name in STATUS_PREDICATES:
        conditions.append(STATUS_PREDICATES[object_name])

    if _has_any_phrase(normalized, VALUE_PHRASES) and object_name in VALUE_PREDICATES:
        conditions.append(VALUE_PREDICATES[object_name])

    if _has_any_phrase(normalized, INDUSTRY_PHRASES) and object_name in INDUSTRY_PREDICATES:
        conditions.append(INDUSTRY_PREDICATES[object_name])

    return conditions


def fallback_intent(text: str) -> Intent:
    """Build an Intent from keywords alone (language model unavailable).

    Fields are left empty so the assembler projects the object's default fields.
    """

    return Intent(
        object_name=detect_object(text),
        fields=[],
        conditions=[],
        explanation=f"Basic processing: {text.strip()} (language model not available)",
    )
