from greenlight.applications.interfaces.dtos.filter_page import MovieFilterPage
from greenlight.applications.interfaces.dtos.movie import MovieList
from greenlight.applications.services.movie_dto_mapper import MovieDtoMapper
from greenlight.domain.models.filters import MOVIE_SORT_SAFELIST, Filters
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.domain.validator import Validator, validate_filters


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, filter_page: MovieFilterPage) -> MovieList:
        filters = Filters(
            page=filter_page.page,
            page_size=filter_page.page_size,
            sort=filter_page.sort,
            sort_safelist=MOVIE_SORT_SAFELIST,
        )

        v = Validator()
        validate_filters(v, filters)
        v.raise_if_invalid()

        movies, metadata = await self.movie_repository.get_all(
            title=filter_page.title,
            genres=filter_page.genre_list(),
            filters=filters,
        )

        return MovieList(movies=[MovieDtoMapper.to_public(movie) for movie in movies], metadata=metadata)
