import math
from typing import Callable, List

from injector import inject
from structlog.stdlib import BoundLogger

from domain.exceptions import ValidationError
from domain.interfaces import IClock, IMovieValidator
from schemas.movie import MovieInput
from utils.coercion import is_numeric, normalize_str, to_number

MIN_YEAR = 1888
MAX_TITLE_LENGTH = 80
MAX_GENRE_LENGTH = 40
MIN_RATING = 1
MAX_RATING = 10

Check = Callable[[MovieInput, bool], None]


class MovieValidator(IMovieValidator):
    """Runs the field checks in a fixed order; the first failure is raised."""

    @inject
    def __init__(self, clock: IClock, logger: BoundLogger):
        self.clock = clock
        self.logger = logger
        self.checks: List[Check] = [
            self._check_title_required,
            self._check_genre_required,
            self._check_year_required,
            self._check_title_length,
            self._check_genre_length,
            self._check_year_range,
            self._check_rating_range,
        ]

    def validate(self, payload: MovieInput, require_all_fields: bool = True) -> None:
        for check in self.checks:
            try:
                check(payload, require_all_fields)
            except ValidationError as e:
                self.logger.info("Movie payload rejected", error=e.message)
                raise

    def _check_title_required(self, payload: MovieInput, require_all_fields: bool) -> None:
        if require_all_fields and normalize_str(payload.title) == "":
            raise ValidationError("Title is required.")

    def _check_genre_required(self, payload: MovieInput, require_all_fields: bool) -> None:
        if require_all_fields and normalize_str(payload.genre) == "":
            raise ValidationError("Genre is required.")

    def _check_year_required(self, payload: MovieInput, require_all_fields: bool) -> None:
        if require_all_fields and not is_numeric(payload.year):
            raise ValidationError("Year must be a number.")

    def _check_title_length(self, payload: MovieInput, require_all_fields: bool) -> None:
        if len(normalize_str(payload.title)) > MAX_TITLE_LENGTH:
            raise ValidationError(f"Title is too long (max {MAX_TITLE_LENGTH}).")

    def _check_genre_length(self, payload: MovieInput, require_all_fields: bool) -> None:
        if len(normalize_str(payload.genre)) > MAX_GENRE_LENGTH:
            raise ValidationError(f"Genre is too long (max {MAX_GENRE_LENGTH}).")

    def _check_year_range(self, payload: MovieInput, require_all_fields: bool) -> None:
        if payload.year is None:
            return
        if not is_numeric(payload.year):
            raise ValidationError("Year must be a number.")
        max_year = self.clock.current_year() + 1
        year = to_number(payload.year)
        if math.isfinite(year):
            year = math.trunc(year)
        if year < MIN_YEAR or year > max_year:
            raise ValidationError(f"Year must be between {MIN_YEAR} and {max_year}.")

    def _check_rating_range(self, payload: MovieInput, require_all_fields: bool) -> None:
        if payload.rating is None or payload.rating == "":
            return
        if not is_numeric(payload.rating):
            raise ValidationError("Rating must be a number.")
        rating = to_number(payload.rating)
        if rating < MIN_RATING or rating > MAX_RATING:
            raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")
