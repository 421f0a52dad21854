import asyncio
from typing import Awaitable, List, Tuple, TypeVar

from sqlalchemy import cast, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from greenlight.domain.exceptions import (
    DeadlineExceededError,
    EditConflictError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from greenlight.domain.models.filters import Filters
from greenlight.domain.models.metadata import Metadata, calculate_metadata
from greenlight.domain.models.movie import Movie as DomainMovie
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.validator import Validator, validate_movie
from greenlight.infrastructure.logging.logger import Logger
from greenlight.infrastructure.persistence.models import Movie as SQLMovie

logger = Logger.get_logger(__name__)

T = TypeVar("T")

DEFAULT_QUERY_TIMEOUT = 3.0
TEXT_SEARCH_CONFIG = "simple"

_MOVIE_COLUMNS = (
    SQLMovie.id,
    SQLMovie.created_at,
    SQLMovie.title,
    SQLMovie.year,
    SQLMovie.runtime,
    SQLMovie.genres,
    SQLMovie.version,
)

# Sortable columns; get_all never renders a column that is not listed here.
_SORT_COLUMNS = {
    "id": SQLMovie.id,
    "title": SQLMovie.title,
    "year": SQLMovie.year,
    "runtime": SQLMovie.runtime,
}


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession, query_timeout: float = DEFAULT_QUERY_TIMEOUT):
        self.session = session
        self.query_timeout = query_timeout

    def _to_domain(self, row: Row) -> DomainMovie:
        return DomainMovie(
            id=row.id,
            created_at=row.created_at,
            title=row.title,
            year=row.year,
            runtime=row.runtime,
            genres=list(row.genres),
            version=row.version,
        )

    async def _bounded(self, operation: str, awaitable: Awaitable[T]) -> T:
        """Await a database round trip, giving up after ``query_timeout`` seconds.

        On expiry the in-flight statement is cancelled and the session's
        connection is invalidated so the pool discards it instead of reusing
        a connection in an unknown state.
        """
        try:
            return await asyncio.wait_for(awaitable, timeout=self.query_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Movie {operation} exceeded {self.query_timeout}s deadline")
            await self.session.invalidate()
            raise DeadlineExceededError(f"movie {operation} exceeded its {self.query_timeout}s deadline") from e
        except SQLAlchemyError as e:
            logger.error(f"Movie {operation} failed: {e}")
            await self.session.rollback()
            raise RepositoryError(f"movie {operation} failed") from e

    async def insert(self, movie: DomainMovie) -> DomainMovie:
        v = Validator()
        validate_movie(v, movie)
        v.raise_if_invalid()

        query = (
            insert(SQLMovie)
            .values(title=movie.title, year=movie.year, runtime=movie.runtime, genres=movie.genres)
            .returning(SQLMovie.id, SQLMovie.created_at, SQLMovie.version)
        )

        async def _insert():
            result = await self.session.execute(query)
            row = result.one()
            await self.session.commit()
            return row

        row = await self._bounded("insert", _insert())
        movie.id = row.id
        movie.created_at = row.created_at
        movie.version = row.version
        return movie

    async def get(self, movie_id: int) -> DomainMovie:
        # Generated ids start at 1, so anything lower cannot exist.
        if movie_id < 1:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        query = select(*_MOVIE_COLUMNS).where(SQLMovie.id == movie_id)

        async def _get():
            result = await self.session.execute(query)
            return result.one_or_none()

        row = await self._bounded("get", _get())
        if row is None:
            raise NotFoundError(f"Movie with id {movie_id} not found")
        return self._to_domain(row)

    async def get_all(
        self, title: str, genres: List[str], filters: Filters
    ) -> Tuple[List[DomainMovie], Metadata]:
        try:
            column = _SORT_COLUMNS[filters.sort_column()]
        except (ValueError, KeyError):
            raise ValidationError({"sort": "invalid sort value"})
        order_by = column.desc() if filters.sort_direction() == "DESC" else column.asc()

        query = select(func.count().over().label("total_records"), *_MOVIE_COLUMNS)
        if title:
            regconfig = cast(TEXT_SEARCH_CONFIG, REGCONFIG)
            query = query.where(
                func.to_tsvector(regconfig, SQLMovie.title).bool_op("@@")(func.plainto_tsquery(regconfig, title))
            )
        if genres:
            query = query.where(SQLMovie.genres.contains(genres))
        query = query.order_by(order_by, SQLMovie.id.asc()).limit(filters.limit()).offset(filters.offset())

        async def _get_all():
            result = await self.session.execute(query)
            return result.all()

        rows = await self._bounded("list", _get_all())

        total_records = 0
        movies = []
        for row in rows:
            total_records = row.total_records
            movies.append(self._to_domain(row))

        return movies, calculate_metadata(total_records, filters.page, filters.page_size)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        v = Validator()
        validate_movie(v, movie)
        v.raise_if_invalid()

        query = (
            update(SQLMovie)
            .where(SQLMovie.id == movie.id, SQLMovie.version == movie.version)
            .values(
                title=movie.title,
                year=movie.year,
                runtime=movie.runtime,
                genres=movie.genres,
                version=SQLMovie.version + 1,
            )
            .returning(SQLMovie.version)
            .execution_options(synchronize_session=False)
        )

        async def _update():
            result = await self.session.execute(query)
            new_version = result.scalar_one_or_none()
            await self.session.commit()
            return new_version

        new_version = await self._bounded("update", _update())
        # Zero matching rows means the row was deleted or its version moved on;
        # both are reported as an edit conflict.
        if new_version is None:
            raise EditConflictError("unable to update the record due to an edit conflict, please try again")

        movie.version = new_version
        return movie

    async def delete(self, movie_id: int) -> None:
        if movie_id < 1:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        query = delete(SQLMovie).where(SQLMovie.id == movie_id).execution_options(synchronize_session=False)

        async def _delete():
            result = await self.session.execute(query)
            await self.session.commit()
            return result.rowcount

        rows_affected = await self._bounded("delete", _delete())
        if rows_affected == 0:
            raise NotFoundError(f"Movie with id {movie_id} not found")
