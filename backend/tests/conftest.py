from pathlib import Path
from typing import Callable, Dict, Iterator, List
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from structlog.stdlib import BoundLogger

from core.main import app
from core.service_factories import get_watchlist_manager
from domain.entities import Movie
from domain.interfaces import IClock
from managers.watchlist_manager import WatchlistManager
from repositories.json_store import JsonFileMovieStore
from services.stats_service import StatsService
from services.validation_service import MovieValidator

CURRENT_YEAR = 2025
NOW = 1_735_689_600


class FixedClock(IClock):
    def __init__(self, year: int = CURRENT_YEAR, timestamp: int = NOW):
        self.year = year
        self.now = timestamp

    def current_year(self) -> int:
        return self.year

    def timestamp(self) -> int:
        return self.now


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def validator(fixed_clock, mock_logger) -> MovieValidator:
    return MovieValidator(clock=fixed_clock, logger=mock_logger)


@pytest.fixture
def stats_service(mock_logger) -> StatsService:
    return StatsService(logger=mock_logger)


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "data" / "movies.json"


@pytest.fixture
def json_store(data_file, mock_logger) -> JsonFileMovieStore:
    return JsonFileMovieStore(data_file, mock_logger)


@pytest.fixture
def watchlist_manager(json_store, validator, stats_service, fixed_clock, mock_logger) -> WatchlistManager:
    return WatchlistManager(
        store=json_store,
        validator=validator,
        stats_service=stats_service,
        clock=fixed_clock,
        logger=mock_logger,
    )


@pytest.fixture
def make_movies() -> Callable[..., List[Movie]]:
    """Build ``count`` distinct valid records, newest first."""

    def _make(count: int, genre: str = "Drama") -> List[Movie]:
        return [
            Movie(
                id=f"m_{NOW}_{i:06x}",
                title=f"Movie {i}",
                genre=genre,
                year=2000 + (i % 20),
                rating=None,
                watched=False,
            )
            for i in range(count)
        ]

    return _make


@pytest.fixture
def valid_payload() -> Dict:
    return {
        "title": "The Matrix",
        "genre": "Sci-Fi",
        "year": 1999,
        "rating": 8.7,
        "watched": True,
    }


@pytest.fixture
def client(watchlist_manager) -> Iterator[TestClient]:
    """API client whose manager writes to a temporary data file."""
    app.dependency_overrides[get_watchlist_manager] = lambda: watchlist_manager
    yield TestClient(app)
    app.dependency_overrides = {}
