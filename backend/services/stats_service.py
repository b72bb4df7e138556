from typing import Dict, List

from injector import inject
from structlog.stdlib import BoundLogger

from domain.entities import Movie, Stats
from domain.interfaces import IStatsService
from utils.coercion import normalize_str

UNKNOWN_GENRE = "Unknown"


class StatsService(IStatsService):
    @inject
    def __init__(self, logger: BoundLogger):
        self.logger = logger

    def stats(self, movies: List[Movie]) -> Stats:
        watched = 0
        ratings: List[float] = []
        counts: Dict[str, int] = {}

        for movie in movies:
            if movie.watched:
                watched += 1
            if movie.rating is not None:
                ratings.append(float(movie.rating))
            genre = normalize_str(movie.genre) or UNKNOWN_GENRE
            counts[genre] = counts.get(genre, 0) + 1

        avg_rating = sum(ratings) / len(ratings) if ratings else None
        # sorted() is stable, so equal counts keep first-seen order
        genre_counts = dict(sorted(counts.items(), key=lambda item: item[1], reverse=True))
        top_genre = next(iter(genre_counts), None)

        self.logger.info(
            "Stats computed",
            total=len(movies),
            watched=watched,
            rated=len(ratings),
            genres=len(genre_counts),
        )
        return Stats(
            total=len(movies),
            watched=watched,
            avg_rating=avg_rating,
            top_genre=top_genre,
            genre_counts=genre_counts,
        )
