"""
DreamHome API — Client SQLAlchemy Model
=========================================

What:  ORM mapping of the `Client` table: prospective renters registered
       at a branch by a member of staff.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Client(Base):
    """A registered client, keyed by client number (e.g. 'CR76')."""

    __tablename__ = "Client"

    client_no: Mapped[str] = mapped_column("clientNo", String(5), primary_key=True)
    f_name: Mapped[Optional[str]] = mapped_column("fName", String(15))
    l_name: Mapped[Optional[str]] = mapped_column("lName", String(15))
    tel_no: Mapped[Optional[str]] = mapped_column("telNo", String(13))
    pref_type: Mapped[Optional[str]] = mapped_column("prefType", String(10))
    max_rent: Mapped[Optional[float]] = mapped_column("maxRent", Numeric(9, 2, asdecimal=False))
    reg_branch_no: Mapped[Optional[str]] = mapped_column(
        "regBranchNo", String(4), ForeignKey("Branch.branchNo")
    )
    reg_staff_no: Mapped[Optional[str]] = mapped_column(
        "regStaffNo", String(5), ForeignKey("Staff.staffNo")
    )

    def __repr__(self) -> str:
        return f"<Client(client_no='{self.client_no}', pref_type='{self.pref_type}')>"
