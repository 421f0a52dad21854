from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

from greenlight.domain.models.metadata import Metadata


def _parse_runtime(value: Union[int, str]) -> int:
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError("invalid runtime format")
    return value


# Runtime travels over JSON as a quoted integer, e.g. "155".
Runtime = Annotated[int, BeforeValidator(_parse_runtime), PlainSerializer(str, return_type=str, when_used="json")]


class MovieSchema(BaseModel):
    title: str = ""
    year: int = 0
    runtime: Runtime = 0
    genres: Optional[List[str]] = None


class MovieUpdateSchema(BaseModel):
    title: Optional[str] = None
    year: Optional[int] = None
    runtime: Optional[Runtime] = None
    genres: Optional[List[str]] = None


class MoviePublic(BaseModel):
    id: int
    title: str
    year: int
    runtime: Runtime
    genres: List[str]
    version: int
    model_config = ConfigDict(from_attributes=True)


class MovieList(BaseModel):
    movies: list[MoviePublic]
    metadata: Metadata
