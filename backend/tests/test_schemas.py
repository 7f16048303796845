"""
DreamHome API — Schema Tests
==============================

What:  Checks that the JSON contract lines up with the table columns.
Why:   RecordService inserts `model_dump(by_alias=True)` directly, so every
       alias must be a column name of the matching table.
"""

import pytest
from pydantic import ValidationError

from app.models.branch import Branch
from app.models.client import Client
from app.models.property import Property
from app.models.staff import Staff
from app.schemas.records import (
    BranchCreated,
    BranchRecord,
    ClientRecord,
    PropertyRecord,
    StaffRecord,
)


@pytest.mark.parametrize(
    "schema, model",
    [
        (BranchRecord, Branch),
        (StaffRecord, Staff),
        (PropertyRecord, Property),
        (ClientRecord, Client),
    ],
)
def test_aliases_match_table_columns(schema, model):
    aliases = set(schema().model_dump(by_alias=True))
    assert aliases == set(model.__table__.columns.keys())


def test_camel_case_body_is_accepted():
    staff = StaffRecord.model_validate({"staffNo": "SG5", "fName": "Susan", "lName": "Brand"})
    assert staff.staff_no == "SG5"
    assert staff.f_name == "Susan"
    assert staff.position is None


def test_missing_fields_default_to_none():
    client = ClientRecord.model_validate({})
    assert client.model_dump() == {
        "client_no": None,
        "f_name": None,
        "l_name": None,
        "tel_no": None,
        "pref_type": None,
        "max_rent": None,
        "reg_branch_no": None,
        "reg_staff_no": None,
    }


def test_numbers_for_text_columns_become_strings():
    branch = BranchRecord.model_validate({"branchNo": 5, "postcode": 12345})
    assert branch.branch_no == "5"
    assert branch.postcode == "12345"


def test_uncoercible_value_is_rejected():
    with pytest.raises(ValidationError):
        PropertyRecord.model_validate({"propertyNo": "PG4", "rooms": "several"})


def test_created_response_uses_camel_case_key():
    body = BranchCreated(branch_id="B003").model_dump(by_alias=True)
    assert body == {"message": "Branch added successfully", "branchId": "B003"}
