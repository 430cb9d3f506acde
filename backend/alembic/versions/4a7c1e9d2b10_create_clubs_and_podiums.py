"""create clubs and podiums

Revision ID: 4a7c1e9d2b10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM

from alembic import op

# revision identifiers, used by Alembic.
revision: str | None = "4a7c1e9d2b10"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None

podium_category_enum = ENUM(
    "U11",
    "U13",
    "U15",
    "U17",
    "U20",
    "SENIOR",
    "VETERAN",
    name="podium_category",
    create_type=False,
)

podium_place_enum = ENUM(
    "1",
    "2",
    "3",
    name="podium_place",
    create_type=False,
)


def upgrade() -> None:
    podium_category_enum.create(op.get_bind(), checkfirst=True)
    podium_place_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "clubs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_clubs_id"), "clubs", ["id"], unique=False)
    op.create_index(op.f("ix_clubs_name"), "clubs", ["name"], unique=False)
    op.create_index(op.f("ix_clubs_owner_id"), "clubs", ["owner_id"], unique=False)

    op.create_table(
        "podiums",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("player", sa.String(), nullable=False),
        sa.Column("category", podium_category_enum, nullable=False),
        sa.Column("place", podium_place_enum, nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_podiums_id"), "podiums", ["id"], unique=False)
    op.create_index(op.f("ix_podiums_club_id"), "podiums", ["club_id"], unique=False)
    op.create_index(op.f("ix_podiums_player"), "podiums", ["player"], unique=False)
    op.create_index(op.f("ix_podiums_category"), "podiums", ["category"], unique=False)
    op.create_index(op.f("ix_podiums_owner_id"), "podiums", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_podiums_owner_id"), table_name="podiums")
    op.drop_index(op.f("ix_podiums_category"), table_name="podiums")
    op.drop_index(op.f("ix_podiums_player"), table_name="podiums")
    op.drop_index(op.f("ix_podiums_club_id"), table_name="podiums")
    op.drop_index(op.f("ix_podiums_id"), table_name="podiums")
    op.drop_table("podiums")

    op.drop_index(op.f("ix_clubs_owner_id"), table_name="clubs")
    op.drop_index(op.f("ix_clubs_name"), table_name="clubs")
    op.drop_index(op.f("ix_clubs_id"), table_name="clubs")
    op.drop_table("clubs")

    podium_place_enum.drop(op.get_bind(), checkfirst=True)
    podium_category_enum.drop(op.get_bind(), checkfirst=True)
