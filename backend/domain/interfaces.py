from abc import ABC, abstractmethod
from typing import List

from schemas.movie import MovieInput

from .entities import Movie, Stats


class IMovieStore(ABC):
    @abstractmethod
    def load(self) -> List[Movie]:
        pass

    @abstractmethod
    def save(self, movies: List[Movie]) -> None:
        pass


class IMovieValidator(ABC):
    @abstractmethod
    def validate(self, payload: MovieInput, require_all_fields: bool = True) -> None:
        pass


class IStatsService(ABC):
    @abstractmethod
    def stats(self, movies: List[Movie]) -> Stats:
        pass


class IClock(ABC):
    @abstractmethod
    def current_year(self) -> int:
        pass

    @abstractmethod
    def timestamp(self) -> int:
        pass
