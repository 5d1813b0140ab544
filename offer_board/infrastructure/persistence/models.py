from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Offer:
    """Row of the ``ogloszenie`` table.

    Attribute names follow the domain model; the legacy column names are
    kept in the schema.
    """

    __tablename__ = "ogloszenie"

    id: Mapped[int] = mapped_column("numer", Integer, init=False, primary_key=True)
    author_id: Mapped[int] = mapped_column("osoba_id", Integer)
    content: Mapped[str] = mapped_column("tresc", Text)
    category_id: Mapped[int] = mapped_column("kategoria_id", Integer)
    event_date: Mapped[datetime] = mapped_column("data_wydarzenia", DateTime)
    city_id: Mapped[int] = mapped_column("miasto_id", Integer)
    region_id: Mapped[int] = mapped_column("wojewodztwo_id", Integer)
    created_at: Mapped[datetime] = mapped_column("data_dodania", DateTime, server_default=func.now())
