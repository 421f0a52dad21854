from typing import Tuple

from pydantic import BaseModel

MOVIE_SORT_SAFELIST: Tuple[str, ...] = ("id", "title", "year", "runtime", "-id", "-title", "-year", "-runtime")

MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


class Filters(BaseModel):
    page: int = 1
    page_size: int = 20
    sort: str = "id"
    sort_safelist: Tuple[str, ...] = MOVIE_SORT_SAFELIST

    def sort_column(self) -> str:
        if self.sort not in self.sort_safelist:
            raise ValueError(f"unsafe sort parameter: {self.sort}")
        return self.sort[1:] if self.sort.startswith("-") else self.sort

    def sort_direction(self) -> str:
        return "DESC" if self.sort.startswith("-") else "ASC"

    def limit(self) -> int:
        return self.page_size

    def offset(self) -> int:
        return (self.page - 1) * self.page_size
