"""Create DreamHome tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates Branch, Staff, Property and Client with their primary and
       foreign keys. Column names use the DreamHome camelCase spelling.

Rollback: downgrade() drops the tables in reverse dependency order.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Branch",
        sa.Column("branchNo", sa.String(4), nullable=False),
        sa.Column("street", sa.String(25), nullable=True),
        sa.Column("city", sa.String(15), nullable=True),
        sa.Column("postcode", sa.String(8), nullable=True),
        sa.PrimaryKeyConstraint("branchNo"),
    )

    op.create_table(
        "Staff",
        sa.Column("staffNo", sa.String(5), nullable=False),
        sa.Column("fName", sa.String(15), nullable=True),
        sa.Column("lName", sa.String(15), nullable=True),
        sa.Column("position", sa.String(10), nullable=True),
        sa.Column("salary", sa.Numeric(9, 2), nullable=True),
        sa.Column("branchNo", sa.String(4), nullable=True),
        sa.PrimaryKeyConstraint("staffNo"),
        sa.ForeignKeyConstraint(["branchNo"], ["Branch.branchNo"]),
    )

    op.create_table(
        "Property",
        sa.Column("propertyNo", sa.String(5), nullable=False),
        sa.Column("street", sa.String(25), nullable=True),
        sa.Column("city", sa.String(15), nullable=True),
        sa.Column("postcode", sa.String(8), nullable=True),
        sa.Column("type", sa.String(10), nullable=True),
        sa.Column("rooms", sa.Integer(), nullable=True),
        sa.Column("rent", sa.Numeric(9, 2), nullable=True),
        # Owner tables are outside this API: no foreign key
        sa.Column("ownerNo", sa.String(5), nullable=True),
        sa.Column("staffNo", sa.String(5), nullable=True),
        sa.Column("branchNo", sa.String(4), nullable=True),
        sa.PrimaryKeyConstraint("propertyNo"),
        sa.ForeignKeyConstraint(["staffNo"], ["Staff.staffNo"]),
        sa.ForeignKeyConstraint(["branchNo"], ["Branch.branchNo"]),
    )

    op.create_table(
        "Client",
        sa.Column("clientNo", sa.String(5), nullable=False),
        sa.Column("fName", sa.String(15), nullable=True),
        sa.Column("lName", sa.String(15), nullable=True),
        sa.Column("telNo", sa.String(13), nullable=True),
        sa.Column("prefType", sa.String(10), nullable=True),
        sa.Column("maxRent", sa.Numeric(9, 2), nullable=True),
        sa.Column("regBranchNo", sa.String(4), nullable=True),
        sa.Column("regStaffNo", sa.String(5), nullable=True),
        sa.PrimaryKeyConstraint("clientNo"),
        sa.ForeignKeyConstraint(["regBranchNo"], ["Branch.branchNo"]),
        sa.ForeignKeyConstraint(["regStaffNo"], ["Staff.staffNo"]),
    )


def downgrade() -> None:
    """Drop all four tables. Destructive: all data is lost."""
    op.drop_table("Client")
    op.drop_table("Property")
    op.drop_table("Staff")
    op.drop_table("Branch")
