"""HTTP routes for query translation and schema discovery.

Every domain failure maps to a JSON error body (`success: false`); internal errors are logged and
answered with a generic 500 that never leaks details.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from time import monotonic
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.app import App
from src.api.schemas import ErrorResponse, ParseQueryRequest, ParseQueryResponse, QueryMetadata
from src.pipeline import QueryInputError, process
from src.soql.builder import UnsupportedObjectError
from src.soql.validator import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["SOQL"])


def get_app(request: Request) -> App:
    return request.app.state.app


app_dep = Annotated[App, Depends(get_app)]


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post("/parse-query", response_model=ParseQueryResponse)
async def parse_query(body: ParseQueryRequest, app: app_dep):
    """Translate a natural-language request into a validated SOQL query."""

    started = monotonic()

    # noinspection PyBroadException
    try:
        result = await asyncio.to_thread(process, body.query, app=app)
    except QueryInputError as exc:
        return _error(400, "Invalid input", str(exc))
    except ValidationError as exc:
        logger.info("rejected query reason=%s", exc.reason)
        return _error(400, "Invalid SOQL generated", exc.reason)
    except UnsupportedObjectError as exc:
        logger.info("unsupported object=%s", exc.object_name)
        return _error(422, "SOQL generation failed", str(exc))
    except Exception:
        logger.exception("parse-query failed")
        return _error(500, "Internal server error", "Failed to process query")

    return ParseQueryResponse(
        soql_query=result.query_text,
        explanation=result.explanation,
        fields=list(result.fields),
        object_name=result.object_name,
        conditions=list(result.conditions),
        source=result.source,
        metadata=QueryMetadata(
            original_query=body.query,
            user_id=body.user_id,
            org_id=body.org_id,
            timestamp=datetime.now(UTC),
            processing_time_ms=int((monotonic() - started) * 1000),
        ),
    )


@router.get("/salesforce-schema")
async def salesforce_schema(app: app_dep):
    """Return the queryable objects with their fields, relationships and defaults."""

    return {"success": True, "schema": app.catalog.to_dict()}


@router.get("/parse-query/health")
async def parse_query_health(app: app_dep):
    """Report whether the language-model gateway is configured."""

    return {
        "success": True,
        "service": "Parse Query Service",
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "llm": "configured" if app.llm_config is not None else "not configured",
    }
