"""Tests for the application container wiring."""

from __future__ import annotations

import json
from pathlib import Path

from src.app import create_app
from src.config.settings import Settings


def test_create_app_uses_builtin_catalog() -> None:
    app = create_app(Settings(_env_file=None))

    assert "Opportunity" in app.catalog
    assert app.llm_config is None
    assert app.lexicon.resolve("deals") == "Opportunity"


def test_create_app_loads_catalog_override(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "objects": {
                    "Invoice__c": {
                        "label": "Invoice",
                        "fields": ["Id", "Name", "Total__c"],
                        "defaultFields": ["Id", "Name", "Total__c"],
                        "defaultSort": ["Name"],
                    }
                }
            }
        ),
        encoding="utf-8",
    )

    app = create_app(
        Settings(_env_file=None, SCHEMA_CATALOG_PATH=str(path), LLM_ENABLED=True, LLM_API_KEY="k")
    )

    assert app.catalog.object_names() == ["Invoice__c"]
    assert app.llm_config is not None
    assert app.llm_config.api_key == "k"
