"""
DreamHome API — Pydantic Record Schemas
=========================================

What:  Pydantic models defining the JSON contract for the four tables.
How:   Python attributes are snake_case; the wire format uses the DreamHome
       camelCase column names through a to_camel alias generator. The
       aliases are also the table's column keys, which is what lets the
       service layer insert a dumped payload directly.

Every body field is optional. A missing field is inserted as NULL and the
database decides whether that is acceptable (a NULL primary key is not).
Numbers sent for text columns are stored as their string form, the way
MySQL stores them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Shared configuration: camelCase aliases, numbers accepted for text."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Table Records — request bodies for POST and items returned by GET
# ══════════════════════════════════════════════════════════════════════════


class BranchRecord(RecordModel):
    branch_no: Optional[str] = Field(default=None, description="Branch number (primary key)")
    street: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None


class StaffRecord(RecordModel):
    staff_no: Optional[str] = Field(default=None, description="Staff number (primary key)")
    f_name: Optional[str] = Field(default=None, description="First name")
    l_name: Optional[str] = Field(default=None, description="Last name")
    position: Optional[str] = None
    salary: Optional[float] = None
    branch_no: Optional[str] = Field(default=None, description="Branch the member works at")


class PropertyRecord(RecordModel):
    property_no: Optional[str] = Field(default=None, description="Property number (primary key)")
    street: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None
    type: Optional[str] = Field(default=None, description="Property type, e.g. House or Flat")
    rooms: Optional[int] = None
    rent: Optional[float] = Field(default=None, description="Monthly rent")
    owner_no: Optional[str] = None
    staff_no: Optional[str] = Field(default=None, description="Managing member of staff")
    branch_no: Optional[str] = None


class ClientRecord(RecordModel):
    client_no: Optional[str] = Field(default=None, description="Client number (primary key)")
    f_name: Optional[str] = None
    l_name: Optional[str] = None
    tel_no: Optional[str] = None
    pref_type: Optional[str] = Field(default=None, description="Preferred property type")
    max_rent: Optional[float] = Field(default=None, description="Maximum monthly rent")
    reg_branch_no: Optional[str] = Field(default=None, description="Branch of registration")
    reg_staff_no: Optional[str] = Field(default=None, description="Registering member of staff")


# ══════════════════════════════════════════════════════════════════════════
# Create Responses — returned by POST with the key of the new row
# ══════════════════════════════════════════════════════════════════════════


class BranchCreated(RecordModel):
    message: str = "Branch added successfully"
    branch_id: Optional[str] = None


class StaffCreated(RecordModel):
    message: str = "Staff added successfully"
    staff_id: Optional[str] = None


class PropertyCreated(RecordModel):
    message: str = "Property added successfully"
    property_id: Optional[str] = None


class ClientCreated(RecordModel):
    message: str = "Client added successfully"
    client_id: Optional[str] = None
