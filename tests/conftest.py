"""Pytest configuration.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` without installing the package, and provides shared fixtures for
the built-in catalog and lexicon.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.catalog.schema import SchemaCatalog, default_catalog  # noqa: E402
from src.intent.lexicon import Lexicon, default_lexicon  # noqa: E402


@pytest.fixture(scope="session")
def catalog() -> SchemaCatalog:
    return default_catalog()


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    return default_lexicon()


@pytest.fixture
def app_container(catalog: SchemaCatalog, lexicon: Lexicon):
    """Pipeline container with the gateway disabled and no `.env` lookup."""

    from src.app import App
    from src.config.settings import Settings

    return App(
        settings=Settings(_env_file=None, LLM_ENABLED=False, MAX_QUERY_LENGTH=200),
        catalog=catalog,
        lexicon=lexicon,
        llm_config=None,
    )
