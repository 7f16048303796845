"""
DreamHome API — Property Route Handlers
=========================================

What:  GET /properties (list), GET /properties/{propertyNo} (detail),
       POST /properties (add), DELETE /properties/{propertyNo} (remove).
Why:   Property is the only resource looked up by key; an unknown key
       returns 404 through NotFoundError.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.records import PropertyCreated, PropertyRecord
from app.services.record_service import property_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Properties"])


@router.get(
    "/properties",
    response_model=List[PropertyRecord],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all properties",
)
async def list_properties(db: AsyncSession = Depends(get_db_session)) -> List[PropertyRecord]:
    return await property_service.list_all(db)


@router.get(
    "/properties/{property_no}",
    response_model=PropertyRecord,
    responses={
        200: {"description": "The property", "model": PropertyRecord},
        404: {"description": "Property not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get a single property by property number",
)
async def get_property(
    property_no: str,
    db: AsyncSession = Depends(get_db_session),
) -> PropertyRecord:
    """
    Get one property.

    Args:
        property_no: Property number path parameter, e.g. 'PG16'.
    """
    return await property_service.get(db, property_no)


@router.post(
    "/properties",
    response_model=PropertyCreated,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Add a new property",
)
async def add_property(
    prop: PropertyRecord,
    db: AsyncSession = Depends(get_db_session),
) -> PropertyCreated:
    return await property_service.create(db, prop)


@router.delete(
    "/properties/{property_no}",
    response_model=MessageResponse,
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Delete a property",
)
async def delete_property(
    property_no: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    deleted = await property_service.delete(db, property_no)
    if not deleted:
        logger.debug("Delete of unknown property %s", property_no)
    return MessageResponse(message="Property deleted successfully")
