from greenlight.applications.interfaces.dtos.movie import MoviePublic
from greenlight.domain.models.movie import Movie


class MovieDtoMapper:
    """Maps domain movies to their public representation"""

    @staticmethod
    def to_public(movie: Movie) -> MoviePublic:
        return MoviePublic(
            id=movie.id,
            title=movie.title,
            year=movie.year,
            runtime=movie.runtime,
            genres=movie.genres or [],
            version=movie.version,
        )
