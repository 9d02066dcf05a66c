"""Intent models (Pydantic).

`ModelOutput` is the contract with the language-model gateway; `Intent` is the contract between the
intent extractor and the deterministic query assembler.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractionSource(StrEnum):
    """Which branch of the extractor produced an Intent."""

    llm = "llm"
    llm_text = "llm_text"
    rules = "rules"


def _clean_strings(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class ModelOutput(BaseModel):
    """Structured reply of the language model.

    Every key is optional; unknown keys (the model tends to add a few) are ignored.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    object: str | None = None
    fields: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    explanation: str | None = None
    intent: str | None = None

    @field_validator("fields", "conditions", mode="before")
    @classmethod
    def coerce_string_lists(cls, value: Any) -> Any:
        """Accept `null` and a bare string where a list of strings is expected."""

        return _clean_strings(value)


class Intent(BaseModel):
    """What to query: object, projected fields and raw WHERE predicates.

    Fields and conditions are suggestions at this stage; the assembler validates fields against the
    schema catalog and deduplicates conditions.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    object_name: str = Field(min_length=1)
    fields: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    explanation: str = ""


def model_output_from_obj(obj: Any) -> ModelOutput:
    """Validate and parse a ModelOutput from an arbitrary decoded JSON object."""

    return ModelOutput.model_validate(obj)
