"""
Generation API routes.

POST /api/generate    - extract requirements from free text
GET  /api/failures    - recent failure records (diagnostics, opt-in)
"""

import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, Request
from starlette.concurrency import run_in_threadpool

from extraction import ErrorSource, GenerationResult, ValidationError, validate_generation_request
from infra.bootstrap import AppServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Generation"])
failures_router = APIRouter(prefix="/api", tags=["Diagnostics"])


def _services(request: Request) -> AppServices:
    return request.app.state.services


@router.post("/generate", responses={200: {"model": GenerationResult}})
async def generate(request: Request):
    """
    Extract structured requirements from an app description.

    The body is decoded by hand so a missing field, an empty string and an
    oversized string each get their own 400 message.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    text = validate_generation_request(payload)
    logger.debug(f"Generation requested ({len(text)} chars)")

    # Provider call blocks; keep it off the event loop
    return await run_in_threadpool(_services(request).orchestrator.extract, text)


@failures_router.get("/failures")
async def list_failures(
    request: Request,
    source: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
) -> Dict[str, List[Dict[str, Any]]]:
    """Read-only view of the failure log, newest first."""
    failure_logger = _services(request).failure_logger

    if source is None:
        records = failure_logger.get_recent_failures(limit)
    else:
        try:
            error_source = ErrorSource(source)
        except ValueError:
            raise ValidationError(f"Unknown error source: {source}")
        records = failure_logger.get_failures_by_source(error_source, limit)

    return {"failures": [record.to_dict() for record in records]}
