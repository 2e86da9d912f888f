from fastapi import HTTPException
from postgrest.exceptions import APIError
from typing import Optional
import logging

logger = logging.getLogger(__name__)

# PostgREST / Postgres error codes we translate into client errors
UNIQUE_VIOLATION = "23505"
NO_ROWS = "PGRST116"


def raise_for_api_error(
    exc: Exception,
    default_detail: str,
    conflict_detail: Optional[str] = None,
    not_found_detail: Optional[str] = None,
):
    """Re-raise a Supabase error as HTTPException (409 unique, 404 no rows, else 500)."""
    if isinstance(exc, HTTPException):
        raise exc
    if isinstance(exc, APIError):
        if exc.code == UNIQUE_VIOLATION and conflict_detail:
            raise HTTPException(status_code=409, detail=conflict_detail)
        if exc.code == NO_ROWS and not_found_detail:
            raise HTTPException(status_code=404, detail=not_found_detail)
    logger.error(f"{default_detail}: {exc}")
    raise HTTPException(status_code=500, detail=default_detail)
