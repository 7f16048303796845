"""
DreamHome API — Record Service Unit Tests
===========================================

What:  Tests for RecordService statement building and error translation.
How:   Uses mock DB sessions (no real database).

What we test:
    ✅ list_all / get convert ORM rows into record schemas
    ✅ Missing row raises NotFoundError
    ✅ create issues one INSERT with the camelCase column names and commits it
    ✅ A failed commit is reported as DatabaseError, not as success
    ✅ Driver errors become DatabaseError with table/key context
    ✅ delete reports the affected row count
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import DatabaseError, NotFoundError
from app.models.branch import Branch
from app.models.property import Property
from app.schemas.records import BranchRecord, PropertyRecord, StaffRecord
from app.services.record_service import (
    branch_service,
    property_service,
    staff_service,
)


class TestRecordServiceList:
    """Tests for list_all."""

    @pytest.mark.asyncio
    async def test_list_all_returns_records(self, mock_db_session):
        """ORM rows should come back as record schemas."""
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [
            Branch(branch_no="B005", street="22 Deer Rd", city="London", postcode="SW1 4EH"),
            Branch(branch_no="B007", street="16 Argyll St", city="Aberdeen", postcode="AB2 3SU"),
        ]
        mock_db_session.execute.return_value = mock_result

        result = await branch_service.list_all(mock_db_session)

        assert [r.branch_no for r in result] == ["B005", "B007"]
        assert isinstance(result[0], BranchRecord)
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_all_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await staff_service.list_all(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_all_wraps_driver_error(self, mock_db_session):
        """A lost connection should surface as DatabaseError."""
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("server has gone away"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await branch_service.list_all(mock_db_session)

        assert exc_info.value.message == "Database error"
        assert exc_info.value.context["table"] == "Branch"


class TestRecordServiceGet:
    """Tests for get by primary key."""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = Property(
            property_no="PG16", city="Glasgow", type="Flat", rooms=4, rent=450.0,
        )
        mock_db_session.execute.return_value = mock_result

        result = await property_service.get(mock_db_session, "PG16")

        assert isinstance(result, PropertyRecord)
        assert result.property_no == "PG16"
        assert result.rooms == 4
        assert result.street is None

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_db_session):
        """Unknown key should raise NotFoundError with a resource-specific message."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        with pytest.raises(NotFoundError) as exc_info:
            await property_service.get(mock_db_session, "PX99")

        assert exc_info.value.message == "Property not found"
        assert exc_info.value.context["resource_id"] == "PX99"


class TestRecordServiceCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_inserts_column_names(self, mock_db_session):
        """The INSERT should target the table's own column names."""
        record = StaffRecord.model_validate(
            {"staffNo": "SG37", "fName": "Ann", "lName": "Beech", "salary": 12000}
        )

        result = await staff_service.create(mock_db_session, record)

        assert result.staff_id == "SG37"
        assert result.message == "Staff added successfully"

        stmt = mock_db_session.execute.await_args.args[0]
        assert stmt.table.name == "Staff"
        params = stmt.compile().params
        assert params["staffNo"] == "SG37"
        assert params["fName"] == "Ann"
        assert params["salary"] == 12000
        # Missing fields are sent as NULL
        assert params["branchNo"] is None
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_duplicate_key_raises_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("Duplicate entry 'B005'"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await branch_service.create(mock_db_session, BranchRecord(branch_no="B005"))

        assert exc_info.value.context["key"] == "B005"
        assert exc_info.value.context["error_type"] == "IntegrityError"

    @pytest.mark.asyncio
    async def test_create_commit_failure_raises_database_error(self, mock_db_session):
        """A connection lost at COMMIT must not look like a successful insert."""
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("lost connection"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await branch_service.create(mock_db_session, BranchRecord(branch_no="B005"))

        assert exc_info.value.context["error_type"] == "OperationalError"
        assert "lost connection" in exc_info.value.context["detail"]


class TestRecordServiceDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_returns_rowcount(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_db_session.execute.return_value = mock_result

        assert await property_service.delete(mock_db_session, "PG16") == 1
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_row_is_not_an_error(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 0
        mock_db_session.execute.return_value = mock_result

        assert await staff_service.delete(mock_db_session, "SX00") == 0

    @pytest.mark.asyncio
    async def test_delete_referenced_row_raises_database_error(self, mock_db_session):
        """Foreign key violations surface as DatabaseError."""
        mock_db_session.execute = AsyncMock(
            side_effect=IntegrityError("DELETE", {}, Exception("a foreign key constraint fails"))
        )

        with pytest.raises(DatabaseError):
            await staff_service.delete(mock_db_session, "SL21")

    @pytest.mark.asyncio
    async def test_delete_commit_failure_raises_database_error(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_db_session.execute.return_value = mock_result
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("lost connection"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await property_service.delete(mock_db_session, "PG16")

        assert exc_info.value.context["key"] == "PG16"


def test_key_column_names():
    assert branch_service.key_column_name == "branchNo"
    assert staff_service.key_column_name == "staffNo"
    assert property_service.key_column_name == "propertyNo"
