"""
/v1/sisters -- Record lookup, validation and reload.

Lookups read from the app's record store, loading it on first use.
A name that matches nothing is a 404, never a server error: a failed
data load looks the same as an unknown name to the caller.
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from greetings.models.schemas import (
    ExistsResponse,
    LoadResponse,
    SisterRecord,
    ValidationResult,
)
from greetings.validator import validate_sister_data

router = APIRouter()


@router.post(
    "/v1/sisters/validate",
    response_model=ValidationResult,
    summary="Validate a candidate record",
    description=(
        "Run every record check and return all failures at once. "
        "The admin editing form calls this before saving. "
        "Any JSON body is accepted; a malformed one just fails the checks."
    ),
    tags=["Sisters"],
)
async def validate(candidate: Any = Body(default=None)) -> ValidationResult:
    return validate_sister_data(candidate)


@router.post(
    "/v1/sisters/reload",
    response_model=LoadResponse,
    summary="Reload the data source",
    description="Fetch the JSON data source again and replace every record in memory.",
    tags=["Sisters"],
)
async def reload(request: Request) -> LoadResponse:
    result = await request.app.state.store.load()
    return LoadResponse(ok=result.ok, count=len(result.records), error=result.error)


@router.get(
    "/v1/sisters/{name}",
    response_model=SisterRecord,
    summary="Look up a record by name",
    description="Case and surrounding whitespace in the name are ignored.",
    tags=["Sisters"],
)
async def get_sister(name: str, request: Request) -> SisterRecord:
    record = await request.app.state.lookup.find(name)

    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"Sister '{name.strip()}' not found.",
        )

    return record


@router.get(
    "/v1/sisters/{name}/exists",
    response_model=ExistsResponse,
    summary="Check whether a record exists",
    tags=["Sisters"],
)
async def sister_exists(name: str, request: Request) -> ExistsResponse:
    exists = await request.app.state.lookup.exists(name)
    return ExistsResponse(name=name, exists=exists)
