from greenlight.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from greenlight.applications.services.movie_dto_mapper import MovieDtoMapper
from greenlight.domain.models.movie import Movie
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        logger.info(f"Creating movie: {movie_data.title}")

        movie = Movie(
            title=movie_data.title,
            year=movie_data.year,
            runtime=movie_data.runtime,
            genres=movie_data.genres,
        )

        created_movie = await self.movie_repository.insert(movie)

        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        logger.info(f"Movie created successfully: {created_movie.id}")
        return MovieDtoMapper.to_public(created_movie)
