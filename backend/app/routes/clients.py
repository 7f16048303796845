"""
DreamHome API — Client Route Handlers
=======================================

What:  GET /clients (list) and POST /clients (add).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.records import ClientCreated, ClientRecord
from app.services.record_service import client_service

router = APIRouter(tags=["Clients"])


@router.get(
    "/clients",
    response_model=List[ClientRecord],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all clients",
)
async def list_clients(db: AsyncSession = Depends(get_db_session)) -> List[ClientRecord]:
    return await client_service.list_all(db)


@router.post(
    "/clients",
    response_model=ClientCreated,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Register a new client",
)
async def add_client(
    client: ClientRecord,
    db: AsyncSession = Depends(get_db_session),
) -> ClientCreated:
    return await client_service.create(db, client)
