import math
import secrets
from typing import List, Optional

from structlog.stdlib import BoundLogger

from domain.entities import Movie, MoviePage, Stats
from domain.exceptions import MovieNotFoundError
from domain.interfaces import IClock, IMovieStore, IMovieValidator, IStatsService
from schemas.movie import MovieInput
from utils.coercion import normalize_str, to_bool, to_int, to_optional_rating

PAGE_SIZE = 10


class WatchlistManager:
    """Request-scoped orchestration of store, validator and stats.

    Every operation loads the whole collection and, for mutations, saves the
    whole collection back. Nothing is cached between calls.
    """

    def __init__(
        self,
        store: IMovieStore,
        validator: IMovieValidator,
        stats_service: IStatsService,
        clock: IClock,
        logger: BoundLogger,
    ):
        self.store = store
        self.validator = validator
        self.stats_service = stats_service
        self.clock = clock
        self.logger = logger

    def list_page(self, page: int) -> MoviePage:
        movies = self.store.load()
        total = len(movies)
        total_pages = max(1, math.ceil(total / PAGE_SIZE))
        page = min(max(page, 1), total_pages)
        start = (page - 1) * PAGE_SIZE
        self.logger.info("Listing movies", page=page, total=total, total_pages=total_pages)
        return MoviePage(
            movies=movies[start : start + PAGE_SIZE],
            page=page,
            page_size=PAGE_SIZE,
            total=total,
            total_pages=total_pages,
        )

    def create(self, payload: MovieInput) -> Movie:
        self.validator.validate(payload, require_all_fields=True)
        movies = self.store.load()
        movie = self._build_movie(self._new_id(movies), payload)
        movies.insert(0, movie)
        self.store.save(movies)
        self.logger.info("Movie created", movie_id=movie.id, title=movie.title)
        return movie

    def update(self, movie_id: str, payload: MovieInput) -> Movie:
        movies = self.store.load()
        index = self._find_index(movies, movie_id)
        if index is None:
            self.logger.warning("Update of unknown movie", movie_id=movie_id)
            raise MovieNotFoundError()

        self.validator.validate(payload, require_all_fields=True)
        movie = self._build_movie(movie_id, payload)
        movies[index] = movie
        self.store.save(movies)
        self.logger.info("Movie updated", movie_id=movie_id)
        return movie

    def delete(self, movie_id: str) -> None:
        movies = self.store.load()
        index = self._find_index(movies, movie_id)
        if index is None:
            self.logger.warning("Delete of unknown movie", movie_id=movie_id)
            raise MovieNotFoundError()

        del movies[index]
        self.store.save(movies)
        self.logger.info("Movie deleted", movie_id=movie_id, remaining=len(movies))

    def stats(self) -> Stats:
        return self.stats_service.stats(self.store.load())

    def _new_id(self, movies: List[Movie]) -> str:
        taken = {m.id for m in movies}
        while True:
            movie_id = f"m_{self.clock.timestamp()}_{secrets.token_hex(3)}"
            if movie_id not in taken:
                return movie_id

    @staticmethod
    def _find_index(movies: List[Movie], movie_id: str) -> Optional[int]:
        for i, movie in enumerate(movies):
            if movie.id == movie_id:
                return i
        return None

    @staticmethod
    def _build_movie(movie_id: str, payload: MovieInput) -> Movie:
        return Movie(
            id=movie_id,
            title=normalize_str(payload.title),
            genre=normalize_str(payload.genre),
            year=to_int(payload.year),
            rating=to_optional_rating(payload.rating),
            watched=to_bool(payload.watched),
        )
