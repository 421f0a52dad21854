from datetime import datetime
from typing import List

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Identity, Index, Integer, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"
    __table_args__ = (
        CheckConstraint("runtime >= 0", name="movies_runtime_check"),
        CheckConstraint("year BETWEEN 1888 AND date_part('year', now())", name="movies_year_check"),
        CheckConstraint("array_length(genres, 1) BETWEEN 1 AND 5", name="genres_length_check"),
        Index("movies_title_idx", text("to_tsvector('simple', title)"), postgresql_using="gin"),
        Index("movies_genres_idx", "genres", postgresql_using="gin"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(), init=False, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, server_default=func.now())
    title: Mapped[str] = mapped_column(Text)
    year: Mapped[int] = mapped_column(Integer)
    runtime: Mapped[int] = mapped_column(Integer)
    genres: Mapped[List[str]] = mapped_column(ARRAY(Text))
    version: Mapped[int] = mapped_column(Integer, init=False, server_default=text("1"))
