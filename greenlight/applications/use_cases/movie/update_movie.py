from typing import Optional

from greenlight.applications.interfaces.dtos.movie import MoviePublic, MovieUpdateSchema
from greenlight.applications.services.movie_dto_mapper import MovieDtoMapper
from greenlight.domain.exceptions import EditConflictError
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(
        self, movie_id: int, movie_data: MovieUpdateSchema, expected_version: Optional[int] = None
    ) -> MoviePublic:
        """Apply the fields present in ``movie_data`` to the stored movie.

        When the client sends the version it last saw, a mismatch is reported
        as an edit conflict before any write is attempted.
        """
        movie = await self.movie_repository.get(movie_id)

        if expected_version is not None and expected_version != movie.version:
            raise EditConflictError("unable to update the record due to an edit conflict, please try again")

        if movie_data.title is not None:
            movie.title = movie_data.title
        if movie_data.year is not None:
            movie.year = movie_data.year
        if movie_data.runtime is not None:
            movie.runtime = movie_data.runtime
        if movie_data.genres is not None:
            movie.genres = movie_data.genres

        updated_movie = await self.movie_repository.update(movie)

        logger.info(f"Movie {movie_id} updated to version {updated_movie.version}")
        return MovieDtoMapper.to_public(updated_movie)
