from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from utils.coercion import is_numeric, normalize_str, to_bool, to_int, to_number


@dataclass
class Movie:
    id: str
    title: str
    genre: str
    year: int
    rating: Optional[float] = None
    watched: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        """Build a record read back from storage.

        Stored records are not re-validated; values that cannot be coerced
        fall back to neutral defaults instead of failing the whole load.
        """
        year = data.get("year")
        rating = data.get("rating")
        return cls(
            id=normalize_str(data.get("id")),
            title=normalize_str(data.get("title")),
            genre=normalize_str(data.get("genre")),
            year=to_int(year) if is_numeric(year) else 0,
            rating=to_number(rating) if is_numeric(rating) else None,
            watched=to_bool(data.get("watched", False)),
        )


@dataclass
class MoviePage:
    movies: List[Movie]
    page: int
    page_size: int
    total: int
    total_pages: int


@dataclass
class Stats:
    total: int
    watched: int
    avg_rating: Optional[float]
    top_genre: Optional[str]
    genre_counts: Dict[str, int] = field(default_factory=dict)
