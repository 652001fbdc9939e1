"""
============================================================
CRC CARD (Class / Responsibilities / Collaborators)
============================================================
Class: 001_users (Alembic Migration)

Responsibilities:
  - Create the `users` table the repositories read and write.

Collaborators:
  - PostgreSQL 14+
  - infrastructure/repositories/postgres/user.py (uses this schema as contract)

Policy:
  - BASELINE migration. Later changes go in additive migrations (002+).
  - Naming convention:
      pk_<table>            - Primary keys
      ck_<table>_<col>      - Check constraints
  - balance/debt are unconstrained NUMERIC: exact decimal money, no floats,
    no rounding of sub-cent amounts.
  - status is nullable: a freshly created user has no status.
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, sa.Identity(always=False), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("surname", sa.String(255), nullable=True),
        sa.Column("age", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("balance", sa.Numeric(), nullable=True),
        sa.Column("debt", sa.Numeric(), nullable=True),
        sa.Column("status", sa.String(16), nullable=True),
        # Optimistic concurrency: bumped by every guarded UPDATE.
        sa.Column(
            "version", sa.Integer, nullable=False, server_default=sa.text("0")
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.CheckConstraint(
            "status IS NULL OR status IN ('ACTIVE', 'INACTIVE')",
            name="ck_users_status",
        ),
    )


def downgrade() -> None:
    op.drop_table("users")
