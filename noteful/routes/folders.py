"""
Noteful API: Folder Route Handlers
====================================

What:  CRUD endpoints for folders.
How:   Thin handlers: parse the body, call folder_service, set the status
       code and Location header. Item-scoped routes receive the row through
       the `resolve_folder` dependency, which 404s before the handler runs.

Routes:
    GET    /folders          → 200 [{id, name}]
    POST   /folders          → 201 {id, name} + Location
    GET    /folders/{id}     → 200 {id, name}
    PATCH  /folders/{id}     → 204
    DELETE /folders/{id}     → 204
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.routes.common import BODY_ERRORS, ITEM_ERRORS, item_location
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_service import folder_service
from noteful.services.resource_service import ResolvedRecord

router = APIRouter(prefix="/folders", tags=["Folders"])


async def resolve_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ResolvedRecord:
    """Existence check shared by every /folders/{folder_id} route."""
    return await folder_service.lookup(db, folder_id)


@router.get("", response_model=List[FolderResponse], summary="List all folders")
async def list_folders(db: AsyncSession = Depends(get_db_session)):
    return await folder_service.list(db)


@router.post(
    "",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BODY_ERRORS,
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderCreate] = None,
    db: AsyncSession = Depends(get_db_session),
):
    folder = await folder_service.create(db, payload.model_dump() if payload else {})
    response.headers["Location"] = item_location(request, folder["id"])
    return folder


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses=ITEM_ERRORS,
    summary="Get a folder by id",
)
async def get_folder(folder: ResolvedRecord = Depends(resolve_folder)):
    return folder_service.read(folder)


@router.patch(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**ITEM_ERRORS, **BODY_ERRORS},
    summary="Rename a folder",
)
async def update_folder(
    payload: Optional[FolderUpdate] = None,
    folder: ResolvedRecord = Depends(resolve_folder),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.update(db, folder, payload.model_dump() if payload else {})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ITEM_ERRORS,
    summary="Delete a folder and its notes",
)
async def delete_folder(
    folder: ResolvedRecord = Depends(resolve_folder),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.delete(db, folder)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
