import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from greenlight.domain.exceptions import EditConflictError, NotFoundError
from greenlight.domain.models.filters import Filters
from greenlight.domain.models.metadata import Metadata
from greenlight.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)

from .conftest import BaseIntegrationTest
from .factories import movie_factory

pytestmark = pytest.mark.integration


class TestSQLAlchemyMovieRepositoryIntegration(BaseIntegrationTest):
    """Integration tests for the SQLAlchemy movie repository"""

    @pytest.fixture
    def movie_repository(self, test_session):
        return SQLAlchemyMovieRepository(test_session)

    @pytest_asyncio.fixture
    async def catalog(self, movie_repository):
        movies = [
            movie_factory.create_domain_movie(title="Dune", year=2021, runtime=155, genres=["scifi", "drama"]),
            movie_factory.create_domain_movie(title="Dune: Part Two", year=2024, runtime=166, genres=["scifi"]),
            movie_factory.create_domain_movie(title="Casablanca", year=1942, runtime=102, genres=["drama", "romance"]),
            movie_factory.create_domain_movie(title="Alien", year=1979, runtime=117, genres=["scifi", "horror"]),
            movie_factory.create_domain_movie(title="Heat", year=1995, runtime=170, genres=["crime", "drama"]),
        ]
        for movie in movies:
            await movie_repository.insert(movie)
        return movies

    @pytest.mark.asyncio
    async def test_movie_lifecycle(self, movie_repository):
        movie = movie_factory.create_domain_movie()

        await movie_repository.insert(movie)

        assert movie.id >= 1
        assert movie.version == 1
        assert movie.created_at is not None

        fetched = await movie_repository.get(movie.id)
        assert fetched == movie

        fetched.title = "Dune: Part One"
        await movie_repository.update(fetched)
        assert fetched.version == 2

        stale = movie.model_copy()
        stale.title = "Dune (2021)"
        with pytest.raises(EditConflictError):
            await movie_repository.update(stale)

        stored = await movie_repository.get(movie.id)
        assert stored.version == 2
        assert stored.title == "Dune: Part One"

    @pytest.mark.asyncio
    async def test_update_of_deleted_movie_is_edit_conflict(self, movie_repository):
        movie = await movie_repository.insert(movie_factory.create_domain_movie())
        await movie_repository.delete(movie.id)

        with pytest.raises(EditConflictError):
            await movie_repository.update(movie)

    @pytest.mark.asyncio
    async def test_delete(self, movie_repository):
        movie = await movie_repository.insert(movie_factory.create_domain_movie())

        await movie_repository.delete(movie.id)

        with pytest.raises(NotFoundError):
            await movie_repository.get(movie.id)
        with pytest.raises(NotFoundError):
            await movie_repository.delete(movie.id)

    @pytest.mark.asyncio
    async def test_get_unknown_movie(self, movie_repository):
        with pytest.raises(NotFoundError):
            await movie_repository.get(999)

    @pytest.mark.asyncio
    async def test_get_all_without_filters(self, movie_repository, catalog):
        movies, metadata = await movie_repository.get_all("", [], Filters(page=1, page_size=20))

        assert [movie.id for movie in movies] == sorted(movie.id for movie in catalog)
        assert metadata.total_records == 5

    @pytest.mark.asyncio
    async def test_get_all_full_text_search_is_case_insensitive(self, movie_repository, catalog):
        movies, metadata = await movie_repository.get_all("DUNE", [], Filters())

        assert {movie.title for movie in movies} == {"Dune", "Dune: Part Two"}
        assert metadata.total_records == 2

    @pytest.mark.asyncio
    async def test_get_all_requires_every_genre(self, movie_repository, catalog):
        movies, _ = await movie_repository.get_all("", ["scifi", "drama"], Filters())

        assert [movie.title for movie in movies] == ["Dune"]

    @pytest.mark.asyncio
    async def test_get_all_sorts_and_paginates(self, movie_repository, catalog):
        movies, metadata = await movie_repository.get_all("", [], Filters(page=2, page_size=2, sort="-year"))

        assert [movie.year for movie in movies] == [1995, 1979]
        assert metadata == Metadata(current_page=2, page_size=2, first_page=1, last_page=3, total_records=5)

    @pytest.mark.asyncio
    async def test_get_all_breaks_ties_on_id(self, movie_repository):
        for title in ("Twin B", "Twin A", "Twin C"):
            await movie_repository.insert(movie_factory.create_domain_movie(title=title, year=2000))

        movies, _ = await movie_repository.get_all("", [], Filters(sort="year"))

        ids = [movie.id for movie in movies]
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_get_all_with_no_matches(self, movie_repository, catalog):
        movies, metadata = await movie_repository.get_all("nonexistent", [], Filters(page=3))

        assert movies == []
        assert metadata == Metadata()

    @pytest.mark.asyncio
    async def test_concurrent_updates_with_same_version(self, postgres_engine, movie_repository):
        movie = await movie_repository.insert(movie_factory.create_domain_movie())

        async def rename(title):
            async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
                repository = SQLAlchemyMovieRepository(session)
                candidate = movie.model_copy(update={"title": title})
                return await repository.update(candidate)

        results = await asyncio.gather(rename("First"), rename("Second"), return_exceptions=True)

        assert sum(isinstance(result, EditConflictError) for result in results) == 1
        assert (await movie_repository.get(movie.id)).version == 2
