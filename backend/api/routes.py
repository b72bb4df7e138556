from typing import Optional

from fastapi import APIRouter, Depends, Request

from core.responses import OrjsonResponse
from core.service_factories import get_watchlist_manager
from managers.watchlist_manager import WatchlistManager
from schemas.movie import (
    ErrorResponse,
    MovieInput,
    MoviePageResponse,
    MovieResponse,
    OkResponse,
    StatsResponse,
)
from utils.coercion import parse_page

# Handlers stay "async def" so the synchronous manager runs on the event loop
# thread: load-modify-save sequences in one process never interleave. Plain
# "def" handlers would run in a threadpool and could lose updates.
router = APIRouter(default_response_class=OrjsonResponse)

NOT_FOUND = {404: {"model": ErrorResponse}}
UNPROCESSABLE = {422: {"model": ErrorResponse}}


@router.get("/stats", response_model=StatsResponse)
async def get_stats(manager: WatchlistManager = Depends(get_watchlist_manager)):
    stats = manager.stats()
    return StatsResponse(
        total=stats.total,
        watched=stats.watched,
        avg_rating=stats.avg_rating,
        top_genre=stats.top_genre,
        genre_counts=stats.genre_counts,
    )


@router.get("/movies", response_model=MoviePageResponse)
async def list_movies(
    page: Optional[str] = None,
    manager: WatchlistManager = Depends(get_watchlist_manager),
):
    # page is parsed by hand so "abc" or "2.5" clamp instead of failing with 422
    result = manager.list_page(parse_page(page))
    return MoviePageResponse(
        movies=[MovieResponse(**m.to_dict()) for m in result.movies],
        page=result.page,
        page_size=result.page_size,
        total=result.total,
        total_pages=result.total_pages,
    )


@router.post("/movies", response_model=MovieResponse, status_code=201, responses=UNPROCESSABLE)
async def create_movie(request: Request, manager: WatchlistManager = Depends(get_watchlist_manager)):
    payload = MovieInput.from_body(await request.body())
    movie = manager.create(payload)
    return MovieResponse(**movie.to_dict())


@router.put("/movies/{movie_id}", response_model=MovieResponse, responses={**NOT_FOUND, **UNPROCESSABLE})
async def update_movie(
    movie_id: str,
    request: Request,
    manager: WatchlistManager = Depends(get_watchlist_manager),
):
    payload = MovieInput.from_body(await request.body())
    movie = manager.update(movie_id, payload)
    return MovieResponse(**movie.to_dict())


@router.delete("/movies/{movie_id}", response_model=OkResponse, responses=NOT_FOUND)
async def delete_movie(movie_id: str, manager: WatchlistManager = Depends(get_watchlist_manager)):
    manager.delete(movie_id)
    return OkResponse()
