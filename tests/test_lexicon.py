"""Tests for the business term lexicon."""

from __future__ import annotations

import pytest

from src.intent.lexicon import Lexicon, LexiconEntry, TermCategory


def test_object_synonyms(lexicon: Lexicon) -> None:
    assert lexicon.resolve("customers") == "Account"
    assert lexicon.resolve("deals") == "Opportunity"
    assert lexicon.resolve("tickets") == "Case"
    assert lexicon.resolve("meetings") == "Event"
    assert lexicon.resolve("account") == "Account"


def test_resolution_is_case_insensitive(lexicon: Lexicon) -> None:
    assert lexicon.resolve("Customers") == "Account"
    assert lexicon.resolve("  TECH ") == "Technology"
    assert lexicon.resolve("OPPORTUNITY") == "Opportunity"


def test_status_industry_priority(lexicon: Lexicon) -> None:
    assert lexicon.resolve("won") == "Won"
    assert lexicon.resolve("banking") == "Financial Services"
    assert lexicon.resolve("nonprofit") == "Non-Profit"
    assert lexicon.resolve("urgent") == "High"
    assert lexicon.resolve("minor") == "Low"


def test_unknown_phrase_is_returned_unchanged(lexicon: Lexicon) -> None:
    assert lexicon.resolve("Widget") == "Widget"
    assert lexicon.resolve("high revenue") == "high revenue"


def test_category(lexicon: Lexicon) -> None:
    assert lexicon.category("prospects") == TermCategory.object
    assert lexicon.category("pending") == TermCategory.status
    assert lexicon.category("retail") == TermCategory.industry
    assert lexicon.category("critical") == TermCategory.priority
    assert lexicon.category("Widget") is None


def test_duplicate_phrases_are_rejected() -> None:
    with pytest.raises(ValueError):
        Lexicon.from_entries(
            [
                LexiconEntry(phrase="deals", token="Opportunity", category=TermCategory.object),
                LexiconEntry(phrase="Deals", token="Account", category=TermCategory.object),
            ]
        )
