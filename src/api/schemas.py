"""Request/response models of the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseQueryRequest(_CamelModel):
    query: str
    user_id: str | None = None
    org_id: str | None = None


class QueryMetadata(_CamelModel):
    original_query: str
    user_id: str | None = None
    org_id: str | None = None
    timestamp: datetime
    processing_time_ms: int


class ParseQueryResponse(_CamelModel):
    success: bool = True
    soql_query: str
    explanation: str
    fields: list[str] = Field(default_factory=list)
    object_name: str
    conditions: list[str] = Field(default_factory=list)
    source: str
    metadata: QueryMetadata


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
    message: str
