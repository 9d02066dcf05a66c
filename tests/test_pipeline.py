"""End-to-end tests of the translation pipeline (gateway disabled or stubbed)."""

from __future__ import annotations

import dataclasses

import pytest

from src.app import App
from src.intent import extractor, llm_gateway
from src.intent.llm_gateway import LLMConfig
from src.intent.schema import ExtractionSource
from src.pipeline import QueryInputError, process
from src.soql.builder import UnsupportedObjectError
from src.soql.validator import ValidationError


def test_high_revenue_accounts_without_gateway(app_container: App) -> None:
    result = process("Show me accounts with high revenue", app=app_container)

    assert result.source == ExtractionSource.rules
    assert result.object_name == "Account"
    assert result.query_text == (
        "SELECT Id, Name, Industry, Type, CreatedDate FROM Account "
        "WHERE AnnualRevenue > 1000000 AND IsDeleted = false ORDER BY Name LIMIT 1000"
    )
    assert result.fields == ("Id", "Name", "Industry", "Type", "CreatedDate")
    assert "not available" in result.explanation


def test_open_cases_this_quarter(app_container: App) -> None:
    result = process("open cases this quarter", app=app_container)

    assert result.object_name == "Case"
    assert result.conditions == (
        "CreatedDate = THIS_QUARTER",
        "Status != 'Closed'",
        "IsDeleted = false",
    )
    assert result.query_text.startswith(
        "SELECT Id, CaseNumber, Subject, Status, Priority, CreatedDate FROM Case WHERE"
    )


@pytest.fixture
def gateway_app(app_container: App) -> App:
    return dataclasses.replace(app_container, llm_config=LLMConfig(api_key="test"))


def test_model_reply_is_used(gateway_app: App, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        extractor,
        "complete",
        lambda _text, *, config: (
            '{"object": "deals", "fields": ["Name", "Amount", "StageName"], '
            '"conditions": ["StageName = \'Closed Won\'"], '
            '"explanation": "Won deals with a high amount"}'
        ),
    )
    result = process("high value deals we won", app=gateway_app)

    assert result.source == ExtractionSource.llm
    assert result.query_text == (
        "SELECT Id, Name, Amount, StageName FROM Opportunity "
        "WHERE StageName = 'Closed Won' AND Amount > 100000 AND IsDeleted = false "
        "ORDER BY CloseDate DESC LIMIT 1000"
    )
    assert result.explanation == "Won deals with a high amount"


def test_unsupported_object_from_model(gateway_app: App, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(extractor, "complete", lambda _text, *, config: '{"object": "Widget"}')
    with pytest.raises(UnsupportedObjectError):
        process("widgets", app=gateway_app)


def test_injected_condition_is_rejected(gateway_app: App, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        extractor,
        "complete",
        lambda _text, *, config: '{"object": "Account", "conditions": ["Name = \'x\'; DROP TABLE Account"]}',
    )
    with pytest.raises(ValidationError) as exc_info:
        process("accounts", app=gateway_app)
    assert exc_info.value.reason == "forbidden keyword: DROP"


@pytest.mark.parametrize("raw", ["", "   "])
def test_empty_input_is_rejected(app_container: App, raw: str) -> None:
    with pytest.raises(QueryInputError):
        process(raw, app=app_container)


def test_too_long_input_is_rejected(app_container: App) -> None:
    with pytest.raises(QueryInputError):
        process("accounts " * 50, app=app_container)


@pytest.mark.parametrize(
    "llm_config",
    [
        LLMConfig(api_key="test", backoff_s=0),
        LLMConfig(api_key="test", api_base="api.openai.com/v1"),
    ],
)
def test_transport_failures_degrade_to_rules(
        app_container: App, monkeypatch: pytest.MonkeyPatch, llm_config: LLMConfig
) -> None:
    def _reset(*_args: object, **_kwargs: object) -> None:
        raise ConnectionResetError(104, "Connection reset by peer")

    monkeypatch.setattr(llm_gateway, "urlopen", _reset)
    app = dataclasses.replace(app_container, llm_config=llm_config)

    result = process("Show me accounts with high revenue", app=app)

    assert result.source == ExtractionSource.rules
    assert result.conditions == ("AnnualRevenue > 1000000", "IsDeleted = false")
