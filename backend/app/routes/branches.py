"""
DreamHome API — Branch Route Handlers
=======================================

What:  GET /branches (list) and POST /branches (add).
How:   Thin handlers: extract the body, delegate to branch_service, return JSON.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.records import BranchCreated, BranchRecord
from app.services.record_service import branch_service

router = APIRouter(tags=["Branches"])


@router.get(
    "/branches",
    response_model=List[BranchRecord],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all branches",
)
async def list_branches(db: AsyncSession = Depends(get_db_session)) -> List[BranchRecord]:
    return await branch_service.list_all(db)


@router.post(
    "/branches",
    response_model=BranchCreated,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Add a new branch",
)
async def add_branch(
    branch: BranchRecord,
    db: AsyncSession = Depends(get_db_session),
) -> BranchCreated:
    return await branch_service.create(db, branch)
