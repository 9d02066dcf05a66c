"""Tests for keyword object selection and WHERE predicate scans."""

from __future__ import annotations

from src.intent.rules import detect_object, fallback_intent, scan_conditions


def test_detect_object_keyword_groups() -> None:
    assert detect_object("List my contacts in Boston") == "Contact"
    assert detect_object("which person owns this") == "Contact"
    assert detect_object("New leads") == "Lead"
    assert detect_object("Biggest deals") == "Opportunity"
    assert detect_object("Opportunity pipeline") == "Opportunity"
    assert detect_object("support requests") == "Case"
    assert detect_object("Show me accounts with high revenue") == "Account"


def test_detect_object_first_group_wins() -> None:
    assert detect_object("contacts linked to open deals") == "Contact"


def test_fallback_intent_uses_default_fields() -> None:
    intent = fallback_intent("Show me accounts with high revenue")
    assert intent.object_name == "Account"
    assert intent.fields == []
    assert intent.conditions == []
    assert "not available" in intent.explanation


def test_value_scan_is_object_specific() -> None:
    assert scan_conditions("accounts with high revenue", "Account") == ["AnnualRevenue > 1000000"]
    assert scan_conditions("high value deals", "Opportunity") == ["Amount > 100000"]
    assert scan_conditions("high value leads", "Lead") == []


def test_status_scan_is_object_specific() -> None:
    assert scan_conditions("active accounts", "Account") == ["Active__c = true"]
    assert scan_conditions("open deals", "Opportunity") == ["IsClosed = false"]
    assert scan_conditions("open tickets", "Case") == ["Status != 'Closed'"]
    assert scan_conditions("open leads", "Lead") == []


def test_status_scan_matches_whole_words() -> None:
    assert scan_conditions("inactive accounts", "Account") == []


def test_industry_scan_only_for_accounts() -> None:
    assert scan_conditions("tech companies", "Account") == ["Industry = 'Technology'"]
    assert scan_conditions("technology contacts", "Contact") == []


def test_scans_are_additive_and_ordered() -> None:
    conditions = scan_conditions(
        "Active tech accounts with high revenue created this year", "Account"
    )
    assert conditions == [
        "CreatedDate = THIS_YEAR",
        "Active__c = true",
        "AnnualRevenue > 1000000",
        "Industry = 'Technology'",
    ]


def test_only_one_time_window() -> None:
    conditions = scan_conditions("cases this month and last year", "Case")
    assert conditions == ["CreatedDate = THIS_MONTH"]


def test_no_matches_no_conditions() -> None:
    assert scan_conditions("show everything", "Account") == []


def test_plural_phrase_spellings() -> None:
    assert scan_conditions("technologies accounts", "Account") == ["Industry = 'Technology'"]
    assert scan_conditions("deals with high values", "Opportunity") == []
    assert scan_conditions("high valued deals", "Opportunity") == ["Amount > 100000"]
