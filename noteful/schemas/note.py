"""
Noteful API: Note Request/Response Schemas
============================================

What:  Pydantic models defining the note API contract.
How:   FastAPI parses request bodies into NoteCreate/NoteUpdate (type
       checking only) and serializes NoteResponse for responses and docs.

Design Decision:
    Request schemas declare every field Optional. Required-field and
    at-least-one-field rules live in noteful.services.validation so folders
    and notes report missing input with the same messages. Type errors
    (e.g. a non-integer folder_id) are still rejected by Pydantic and
    mapped to 400 by the RequestValidationError handler.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Body of POST /notes."""
    name: Optional[str] = Field(default=None, description="Note title (required)")
    content: Optional[str] = Field(default=None, description="Note body (required)")
    modified: Optional[datetime] = Field(
        default=None,
        description="Last-modified timestamp; defaults to the current time",
    )
    folder_id: Optional[int] = Field(
        default=None,
        description="Identifier of an existing folder (required)",
    )


class NoteUpdate(BaseModel):
    """Body of PATCH /notes/{id}; any non-empty subset of the fields."""
    name: Optional[str] = None
    content: Optional[str] = None
    modified: Optional[datetime] = None
    folder_id: Optional[int] = None


class NoteResponse(BaseModel):
    """
    A note as returned to clients.

    `name` and `content` are HTML-escaped; `modified` is serialized as an
    ISO 8601 string.
    """
    id: int = Field(description="Store-assigned note identifier")
    name: str = Field(description="Note title (HTML-escaped)")
    content: str = Field(description="Note body (HTML-escaped)")
    modified: datetime = Field(description="Last-modified timestamp")
    folder_id: int = Field(description="Identifier of the owning folder")
