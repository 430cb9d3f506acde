from sqlalchemy import Column, Integer, String, Table
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import DateTime, Enum

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

clubs = Table(
    "clubs",
    metadata,
    Column("id", String, primary_key=True, index=True),
    Column("name", String(255), nullable=False, index=True),
    Column("owner_id", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False),
    Column("updated", DateTimeTZ, nullable=False),
)

# No foreign key on club_id: a podium may reference a club that no longer exists.
podiums = Table(
    "podiums",
    metadata,
    Column("id", String, primary_key=True, index=True),
    Column("club_id", String, nullable=False, index=True),
    Column("player", String, nullable=False, index=True),
    Column(
        "category",
        Enum(
            "U11",
            "U13",
            "U15",
            "U17",
            "U20",
            "SENIOR",
            "VETERAN",
            name="podium_category",
        ),
        nullable=False,
        index=True,
    ),
    Column(
        "place",
        Enum(
            "1",
            "2",
            "3",
            name="podium_place",
        ),
        nullable=False,
    ),
    Column("points", Integer, nullable=False),
    Column("owner_id", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False),
    Column("updated", DateTimeTZ, nullable=False),
)
