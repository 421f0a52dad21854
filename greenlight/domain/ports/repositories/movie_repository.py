from abc import ABC, abstractmethod
from typing import List, Tuple

from greenlight.domain.models.filters import Filters
from greenlight.domain.models.metadata import Metadata
from greenlight.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def insert(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def get(self, movie_id: int) -> Movie:
        pass

    @abstractmethod
    async def get_all(self, title: str, genres: List[str], filters: Filters) -> Tuple[List[Movie], Metadata]:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        pass
