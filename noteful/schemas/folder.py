"""
Noteful API: Folder Request/Response Schemas
==============================================

Every request field is Optional: presence is checked by the shared
validation utilities so a missing field yields the API's own 400 message
rather than FastAPI's generic 422. Unknown fields are ignored (Pydantic's
default `extra="ignore"`).
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderCreate(BaseModel):
    """Body of POST /folders."""
    name: Optional[str] = Field(default=None, description="Folder name (required)")


class FolderUpdate(BaseModel):
    """Body of PATCH /folders/{id}."""
    name: Optional[str] = Field(default=None, description="New folder name")


class FolderResponse(BaseModel):
    """A folder as returned to clients, with `name` HTML-escaped."""
    id: int = Field(description="Store-assigned folder identifier")
    name: str = Field(description="Folder name (HTML-escaped)")
