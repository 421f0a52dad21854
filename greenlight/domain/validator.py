from datetime import datetime
from typing import Dict, Hashable, Iterable

from greenlight.domain.exceptions import ValidationError
from greenlight.domain.models.filters import MAX_PAGE, MAX_PAGE_SIZE, Filters
from greenlight.domain.models.movie import Movie

MIN_MOVIE_YEAR = 1888
MAX_TITLE_BYTES = 500
MAX_GENRES = 5


class Validator:
    """Collects field-keyed error messages; the first message per field wins."""

    def __init__(self):
        self.errors: Dict[str, str] = {}

    def valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        self.errors.setdefault(key, message)

    def check(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_error(key, message)

    def raise_if_invalid(self) -> None:
        if not self.valid():
            raise ValidationError(self.errors)


def permitted_value(value, *permitted_values) -> bool:
    return value in permitted_values


def unique(values: Iterable[Hashable]) -> bool:
    values = list(values)
    return len(set(values)) == len(values)


def validate_movie(v: Validator, movie: Movie) -> None:
    v.check(movie.title != "", "title", "must be provided")
    v.check(len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES, "title", "must not be more than 500 bytes long")

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= MIN_MOVIE_YEAR, "year", "must be greater than 1888")
    v.check(movie.year <= datetime.now().year, "year", "must not be in the future")

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")

    v.check(movie.genres is not None, "genres", "must be provided")
    genres = movie.genres or []
    v.check(len(genres) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(genres) <= MAX_GENRES, "genres", "must not contain more than 5 genres")
    v.check(all(genre != "" for genre in genres), "genres", "must not contain empty values")
    v.check(unique(genres), "genres", "must not contain duplicate values")


def validate_filters(v: Validator, filters: Filters) -> None:
    v.check(filters.page > 0, "page", "must be greater than zero")
    v.check(filters.page <= MAX_PAGE, "page", "must be a maximum of 10 million")
    v.check(filters.page_size > 0, "page_size", "must be greater than zero")
    v.check(filters.page_size <= MAX_PAGE_SIZE, "page_size", "must be a maximum of 100")
    v.check(permitted_value(filters.sort, *filters.sort_safelist), "sort", "invalid sort value")
