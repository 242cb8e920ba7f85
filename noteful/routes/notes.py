"""
Noteful API: Note Route Handlers
==================================

What:  CRUD endpoints for notes.
How:   Same shape as the folder routes; note_service additionally checks
       that `folder_id` names an existing folder.

Routes:
    GET    /notes            → 200 [{id, name, content, modified, folder_id}]
    POST   /notes            → 201 note + Location
    GET    /notes/{id}       → 200 note
    PATCH  /notes/{id}       → 204
    DELETE /notes/{id}       → 204
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.routes.common import BODY_ERRORS, ITEM_ERRORS, item_location
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_service import note_service
from noteful.services.resource_service import ResolvedRecord

router = APIRouter(prefix="/notes", tags=["Notes"])


async def resolve_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ResolvedRecord:
    """Existence check shared by every /notes/{note_id} route."""
    return await note_service.lookup(db, note_id)


@router.get("", response_model=List[NoteResponse], summary="List all notes")
async def list_notes(db: AsyncSession = Depends(get_db_session)):
    return await note_service.list(db)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BODY_ERRORS,
    summary="Create a note",
    description=(
        "Requires name, content and folder_id. `modified` is optional and "
        "defaults to the current time. The folder must already exist."
    ),
)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NoteCreate] = None,
    db: AsyncSession = Depends(get_db_session),
):
    note = await note_service.create(db, payload.model_dump() if payload else {})
    response.headers["Location"] = item_location(request, note["id"])
    return note


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=ITEM_ERRORS,
    summary="Get a note by id",
)
async def get_note(note: ResolvedRecord = Depends(resolve_note)):
    return note_service.read(note)


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**ITEM_ERRORS, **BODY_ERRORS},
    summary="Update some fields of a note",
)
async def update_note(
    payload: Optional[NoteUpdate] = None,
    note: ResolvedRecord = Depends(resolve_note),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.update(db, note, payload.model_dump() if payload else {})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ITEM_ERRORS,
    summary="Delete a note",
)
async def delete_note(
    note: ResolvedRecord = Depends(resolve_note),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete(db, note)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
