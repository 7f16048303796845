"""
DreamHome API — Staff Route Handlers
======================================

What:  GET /staff (list), POST /staff (add), DELETE /staff/{id} (remove).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.records import StaffCreated, StaffRecord
from app.services.record_service import staff_service

router = APIRouter(tags=["Staff"])


@router.get(
    "/staff",
    response_model=List[StaffRecord],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all staff members",
)
async def list_staff(db: AsyncSession = Depends(get_db_session)) -> List[StaffRecord]:
    return await staff_service.list_all(db)


@router.post(
    "/staff",
    response_model=StaffCreated,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Add a new staff member",
)
async def add_staff(
    staff: StaffRecord,
    db: AsyncSession = Depends(get_db_session),
) -> StaffCreated:
    return await staff_service.create(db, staff)


@router.delete(
    "/staff/{staff_no}",
    response_model=MessageResponse,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Delete a staff member",
    description=(
        "Deletes the staff member with the given staff number. Succeeds even if no "
        "such member exists. Fails with 500 while properties or clients still "
        "reference the member."
    ),
)
async def delete_staff(
    staff_no: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await staff_service.delete(db, staff_no)
    return MessageResponse(message="Staff deleted successfully")
