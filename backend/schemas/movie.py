from typing import Any, Dict, List, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field


class MovieInput(BaseModel):
    """Raw create/update payload.

    Values are kept exactly as sent; a field that was omitted or sent as
    null is ``None``. Coercion happens only after validation passes.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    genre: Any = None
    year: Any = None
    rating: Any = None
    watched: Any = None

    @classmethod
    def from_body(cls, body: bytes) -> "MovieInput":
        try:
            data = orjson.loads(body) if body else {}
        except orjson.JSONDecodeError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        return cls.model_validate(data)


class MovieResponse(BaseModel):
    id: str
    title: str
    genre: str
    year: int
    rating: Optional[float]
    watched: bool


class MoviePageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movies: List[MovieResponse]
    page: int
    page_size: int = Field(alias="pageSize")
    total: int
    total_pages: int = Field(alias="totalPages")


class StatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    watched: int
    avg_rating: Optional[float] = Field(alias="avgRating")
    top_genre: Optional[str] = Field(alias="topGenre")
    genre_counts: Dict[str, int] = Field(alias="genreCounts")


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str
