"""
DreamHome API — Property SQLAlchemy Model
===========================================

What:  ORM mapping of the `Property` table: properties offered for rent.
Who:   Managed through /properties, the only resource with a lookup by key.

Query Patterns:
    - List: SELECT * FROM Property
    - Detail: SELECT * FROM Property WHERE propertyNo = :no  (primary key)
    - Delete: DELETE FROM Property WHERE propertyNo = :no

ownerNo has no foreign key: the owner tables are not part of this API.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Property(Base):
    """A rental property, keyed by property number (e.g. 'PG16')."""

    __tablename__ = "Property"

    property_no: Mapped[str] = mapped_column("propertyNo", String(5), primary_key=True)
    street: Mapped[Optional[str]] = mapped_column(String(25))
    city: Mapped[Optional[str]] = mapped_column(String(15))
    postcode: Mapped[Optional[str]] = mapped_column(String(8))
    type: Mapped[Optional[str]] = mapped_column(String(10))
    rooms: Mapped[Optional[int]] = mapped_column(Integer)
    rent: Mapped[Optional[float]] = mapped_column(Numeric(9, 2, asdecimal=False))
    owner_no: Mapped[Optional[str]] = mapped_column("ownerNo", String(5))
    staff_no: Mapped[Optional[str]] = mapped_column(
        "staffNo", String(5), ForeignKey("Staff.staffNo")
    )
    branch_no: Mapped[Optional[str]] = mapped_column(
        "branchNo", String(4), ForeignKey("Branch.branchNo")
    )

    def __repr__(self) -> str:
        return f"<Property(property_no='{self.property_no}', type='{self.type}')>"
