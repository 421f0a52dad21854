from typing import List

from pydantic import BaseModel, Field


class MovieFilterPage(BaseModel):
    title: str = Field(default="", description="Full-text search against movie titles")
    genres: str = Field(default="", description="Comma separated genres that must all be present")
    page: int = Field(default=1, description="Page number, starting at 1")
    page_size: int = Field(default=20, description="Number of movies per page")
    sort: str = Field(default="id", description="Sort key, prefix with '-' for descending order")

    def genre_list(self) -> List[str]:
        return [genre for genre in self.genres.split(",") if genre]
