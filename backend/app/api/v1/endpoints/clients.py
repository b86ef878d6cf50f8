"""
Client API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.client_controller import ClientController
from app.models.user import User
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
    ClientOverviewResponse,
)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Client not found",
    )


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    controller = ClientController(db, current_user.id)
    return await controller.create_client(client_data)


@router.get("", response_model=ClientListResponse)
async def list_clients(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ClientListResponse:
    """List clients, newest first."""
    controller = ClientController(db, current_user.id)
    return await controller.list_clients(skip=skip, limit=limit)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Get client by ID."""
    controller = ClientController(db, current_user.id)
    client = await controller.get_client(client_id)
    if not client:
        raise _not_found()
    return client


@router.get("/{client_id}/overview", response_model=ClientOverviewResponse)
async def get_client_overview(
    client_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ClientOverviewResponse:
    """Get a client with its quotes and jobs."""
    controller = ClientController(db, current_user.id)
    overview = await controller.get_overview(client_id)
    if not overview:
        raise _not_found()
    return overview


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    client_data: ClientUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Update a client."""
    controller = ClientController(db, current_user.id)
    try:
        client = await controller.update_client(client_id, client_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not client:
        raise _not_found()
    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    """Delete a client that has no quotes, jobs or invoices."""
    controller = ClientController(db, current_user.id)
    try:
        deleted = await controller.delete_client(client_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not deleted:
        raise _not_found()
