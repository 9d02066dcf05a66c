"""Application composition root.

This module wires together configuration, the schema catalog, the business term lexicon and the
language-model gateway settings for the translation pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.catalog.schema import SchemaCatalog, default_catalog, load_catalog
from src.config.settings import Settings
from src.intent.lexicon import Lexicon, default_lexicon
from src.intent.llm_gateway import LLMConfig, llm_config_from_settings


@dataclass(frozen=True)
class App:
    """Shared, read-only dependencies of the pipeline."""

    settings: Settings
    catalog: SchemaCatalog
    lexicon: Lexicon
    llm_config: LLMConfig | None = None


def create_app(settings: Settings) -> App:
    """Create the application container.

    The catalog comes from `SCHEMA_CATALOG_PATH` when set, otherwise from the built-in objects.
    """

    if settings.schema_catalog_path is not None:
        catalog = load_catalog(settings.schema_catalog_path)
    else:
        catalog = default_catalog()

    return App(
        settings=settings,
        catalog=catalog,
        lexicon=default_lexicon(),
        llm_config=llm_config_from_settings(settings),
    )
