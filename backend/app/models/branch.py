"""
DreamHome API — Branch SQLAlchemy Model
=========================================

What:  ORM mapping of the `Branch` table: one row per DreamHome office.
Who:   Referenced by Staff, Property and Client through branchNo foreign keys.

Column names keep the DreamHome camelCase spelling (branchNo, postcode) so
the API can be pointed at an existing DreamHome database unchanged; the
Python attributes are snake_case.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Branch(Base):
    """A branch office, keyed by its branch number (e.g. 'B005')."""

    __tablename__ = "Branch"

    branch_no: Mapped[str] = mapped_column("branchNo", String(4), primary_key=True)
    street: Mapped[Optional[str]] = mapped_column(String(25))
    city: Mapped[Optional[str]] = mapped_column(String(15))
    postcode: Mapped[Optional[str]] = mapped_column(String(8))

    def __repr__(self) -> str:
        return f"<Branch(branch_no='{self.branch_no}', city='{self.city}')>"
