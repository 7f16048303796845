"""
DreamHome API — Staff SQLAlchemy Model
========================================

What:  ORM mapping of the `Staff` table.
Who:   Managed through GET/POST /staff and DELETE /staff/{id}.

Staff rows are referenced by Property.staffNo (the member managing the
property) and Client.regStaffNo (the member who registered the client).
Deleting a referenced staff member is rejected by the database.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Staff(Base):
    """A member of staff, keyed by staff number (e.g. 'SG37')."""

    __tablename__ = "Staff"

    staff_no: Mapped[str] = mapped_column("staffNo", String(5), primary_key=True)
    f_name: Mapped[Optional[str]] = mapped_column("fName", String(15))
    l_name: Mapped[Optional[str]] = mapped_column("lName", String(15))
    position: Mapped[Optional[str]] = mapped_column(String(10))
    # asdecimal=False: returned as float so it serializes as a JSON number
    salary: Mapped[Optional[float]] = mapped_column(Numeric(9, 2, asdecimal=False))
    branch_no: Mapped[Optional[str]] = mapped_column(
        "branchNo", String(4), ForeignKey("Branch.branchNo")
    )

    def __repr__(self) -> str:
        return f"<Staff(staff_no='{self.staff_no}', branch_no='{self.branch_no}')>"
