from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from greenlight.applications.interfaces.dtos.filter_page import MovieFilterPage
from greenlight.applications.interfaces.dtos.message import Message
from greenlight.applications.interfaces.dtos.movie import (
    MovieList,
    MoviePublic,
    MovieSchema,
    MovieUpdateSchema,
)
from greenlight.applications.use_cases.movie.create_movie import CreateMovieUseCase
from greenlight.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from greenlight.applications.use_cases.movie.get_movie import GetMovieUseCase
from greenlight.applications.use_cases.movie.get_movies import GetMoviesUseCase
from greenlight.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from greenlight.domain.exceptions import (
    DeadlineExceededError,
    DomainError,
    EditConflictError,
    NotFoundError,
    ValidationError,
)
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.infrastructure.config.dependencies import get_movie_repository
from greenlight.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/v1/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]


def _to_http_error(error: DomainError) -> HTTPException:
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="the requested resource could not be found")
    if isinstance(error, EditConflictError):
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=error.errors)
    if isinstance(error, DeadlineExceededError):
        return HTTPException(status_code=HTTPStatus.GATEWAY_TIMEOUT, detail="the server timed out processing the request")

    logger.exception(f"Unhandled repository failure: {error}")
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail="the server encountered a problem and could not process your request",
    )


@router.post("", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_repository: MovieRepositoryDep):
    try:
        use_case = CreateMovieUseCase(movie_repository)
        return await use_case.execute(movie)
    except DomainError as e:
        raise _to_http_error(e)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise _to_http_error(e)


@router.get("", response_model=MovieList)
async def read_movies(filter_movies: Annotated[MovieFilterPage, Query()], movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMoviesUseCase(movie_repository)
        return await use_case.execute(filter_movies)
    except DomainError as e:
        raise _to_http_error(e)


@router.patch("/{movie_id}", response_model=MoviePublic)
async def update_movie(
    movie_id: int,
    movie: MovieUpdateSchema,
    movie_repository: MovieRepositoryDep,
    x_expected_version: Annotated[Optional[int], Header()] = None,
):
    try:
        use_case = UpdateMovieUseCase(movie_repository)
        return await use_case.execute(movie_id, movie, expected_version=x_expected_version)
    except DomainError as e:
        raise _to_http_error(e)


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: int, movie_repository: MovieRepositoryDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise _to_http_error(e)
