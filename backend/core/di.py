from pathlib import Path
from typing import Optional

from injector import Injector, InstanceProvider, singleton
from structlog.stdlib import BoundLogger

from domain.interfaces import IClock, IMovieStore, IMovieValidator, IStatsService
from repositories.json_store import JsonFileMovieStore
from services.clock import SystemClock
from services.stats_service import StatsService
from services.validation_service import MovieValidator

from .log_config import get_logger
from .settings import settings


def create_injector(data_file: Optional[Path] = None) -> Injector:
    injector = Injector()
    logger = get_logger()
    injector.binder.bind(BoundLogger, to=InstanceProvider(logger), scope=singleton)
    injector.binder.bind(IClock, to=SystemClock, scope=singleton)
    injector.binder.bind(IMovieValidator, to=MovieValidator, scope=singleton)
    injector.binder.bind(IStatsService, to=StatsService, scope=singleton)
    injector.binder.bind(
        IMovieStore,
        to=JsonFileMovieStore(data_file or settings.data_file, logger),
        scope=singleton,
    )
    return injector
