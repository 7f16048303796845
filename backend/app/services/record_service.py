"""
DreamHome API — Record Service (Table Access Layer)
=====================================================

What:  Executes the one SQL statement behind each API operation for a table.
Why:   Keeps SQL and error translation out of the route handlers.
How:   A RecordService is bound to one mapped table. Each method builds a
       single parameterized statement, runs it on the request's session and
       converts SQLAlchemy failures into DatabaseError.
Who:   Called by route handlers; one instance per table at module bottom.

Statement Map:
    list_all()      SELECT * FROM <table>
    get(key)        SELECT * FROM <table> WHERE <pk> = :key
    create(record)  INSERT INTO <table> (<columns>) VALUES (:values)
    delete(key)     DELETE FROM <table> WHERE <pk> = :key

Error Handling Strategy:
    Driver errors (connection lost, duplicate key, NULL key, foreign key
    violation) are re-raised as DatabaseError carrying the table, key and
    driver message; the global handler logs that context once and the
    client only ever sees "Database error".
    create() and delete() commit inside the same try block, so a failed
    commit is reported as a 500 before any success response exists.
    A missing row on get() raises NotFoundError.
"""

import logging
from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError, NotFoundError
from app.models.branch import Branch
from app.models.client import Client
from app.models.property import Property
from app.models.staff import Staff
from app.schemas.records import (
    BranchCreated,
    BranchRecord,
    ClientCreated,
    ClientRecord,
    PropertyCreated,
    PropertyRecord,
    StaffCreated,
    StaffRecord,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
CreatedT = TypeVar("CreatedT", bound=BaseModel)


class RecordService(Generic[RecordT, CreatedT]):
    """
    Create/read/delete access to one table.

    Args:
        model:         Mapped SQLAlchemy class for the table
        record_schema: Pydantic schema for rows (GET items, POST body)
        created_schema: Pydantic schema returned by create()
        resource:      Singular name used in log and error messages
        plural:        Plural name used in log messages
    """

    def __init__(
        self,
        model: Type[Base],
        record_schema: Type[RecordT],
        created_schema: Type[CreatedT],
        resource: str,
        plural: str,
    ):
        self.model = model
        self.record_schema = record_schema
        self.created_schema = created_schema
        self.resource = resource
        self.plural = plural
        # Single-column primary key on every DreamHome table
        self._key_column = list(model.__table__.primary_key.columns)[0]

    @property
    def key_column_name(self) -> str:
        """Database name of the primary key column, e.g. 'propertyNo'."""
        return self._key_column.name

    async def list_all(self, db: AsyncSession) -> List[RecordT]:
        """Return every row of the table."""
        try:
            result = await db.execute(select(self.model))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise DatabaseError(
                context={"table": self.model.__tablename__,
                         "error_type": type(e).__name__, "detail": str(e)},
            ) from e

        return [self.record_schema.model_validate(row, from_attributes=True) for row in rows]

    async def get(self, db: AsyncSession, key: str) -> RecordT:
        """
        Return the row whose primary key equals `key`.

        Raises:
            NotFoundError: No such row (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(self.model).where(self._key_column == key)
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseError(
                context={"table": self.model.__tablename__, "key": key,
                         "error_type": type(e).__name__, "detail": str(e)},
            ) from e

        if row is None:
            raise NotFoundError(resource=self.resource, resource_id=key)

        return self.record_schema.model_validate(row, from_attributes=True)

    async def create(self, db: AsyncSession, record: RecordT) -> CreatedT:
        """
        Insert one row built from `record`.

        Fields missing from the request body are inserted as NULL; the
        database rejects the row if that breaks a constraint.

        Returns:
            The created-response schema carrying the new row's key.
        """
        # Aliases are the column names, so the dump is a column → value map
        values = record.model_dump(by_alias=True)
        key = values.get(self.key_column_name)

        try:
            await db.execute(insert(self.model.__table__).values(**values))
            await db.commit()
        except SQLAlchemyError as e:
            raise DatabaseError(
                context={"table": self.model.__tablename__, "key": key,
                         "error_type": type(e).__name__, "detail": str(e)},
            ) from e

        logger.info("Added %s %s", self.resource, key)
        return self.created_schema(**{f"{self.resource}_id": key})

    async def delete(self, db: AsyncSession, key: str) -> int:
        """
        Delete the row whose primary key equals `key`.

        Deleting a key that does not exist is not an error.

        Returns:
            Number of rows removed (0 or 1).
        """
        try:
            result = await db.execute(
                delete(self.model.__table__).where(self._key_column == key)
            )
            deleted = result.rowcount or 0
            await db.commit()
        except SQLAlchemyError as e:
            raise DatabaseError(
                context={"table": self.model.__tablename__, "key": key,
                         "error_type": type(e).__name__, "detail": str(e)},
            ) from e

        logger.info("Deleted %s %s (%s rows)", self.resource, key, deleted)
        return deleted


# ── Singleton Instances ───────────────────────────────────────────────────
branch_service = RecordService(Branch, BranchRecord, BranchCreated, "branch", "branches")
staff_service = RecordService(Staff, StaffRecord, StaffCreated, "staff", "staff")
property_service = RecordService(
    Property, PropertyRecord, PropertyCreated, "property", "properties"
)
client_service = RecordService(Client, ClientRecord, ClientCreated, "client", "clients")
