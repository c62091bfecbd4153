"""Add pending_password_hash to users

Revision ID: 8b4e6d2f1a37
Revises: 3f1c2a7d9b10
Create Date: 2026-10-19 14:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b4e6d2f1a37"
down_revision: Union[str, Sequence[str], None] = "3f1c2a7d9b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users",
        sa.Column(
            "pending_password_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt hash applied once the change code is confirmed",
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "pending_password_hash")
