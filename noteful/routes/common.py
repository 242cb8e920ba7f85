"""
Noteful API: Shared Route Helpers
===================================
"""

from typing import Any, Dict

from fastapi import Request

from noteful.schemas.common import ErrorResponse

# OpenAPI error documentation reused by both resource routers
ITEM_ERRORS: Dict[int, Dict[str, Any]] = {
    404: {"description": "No row with this id", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}
BODY_ERRORS: Dict[int, Dict[str, Any]] = {
    400: {"description": "Missing or invalid fields", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}


def item_location(request: Request, record_id: int) -> str:
    """
    Location of a newly created item: the collection path the client
    posted to, plus `/<id>`. Works under any API prefix.
    """
    return f"{request.url.path.rstrip('/')}/{record_id}"
