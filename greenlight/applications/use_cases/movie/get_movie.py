from greenlight.applications.interfaces.dtos.movie import MoviePublic
from greenlight.applications.services.movie_dto_mapper import MovieDtoMapper
from greenlight.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> MoviePublic:
        movie = await self.movie_repository.get(movie_id)
        return MovieDtoMapper.to_public(movie)
