from fastapi_injector import Injected
from structlog.stdlib import BoundLogger

from domain.interfaces import IClock, IMovieStore, IMovieValidator, IStatsService
from managers.watchlist_manager import WatchlistManager


def get_watchlist_manager(
    store: IMovieStore = Injected(IMovieStore),
    validator: IMovieValidator = Injected(IMovieValidator),
    stats_service: IStatsService = Injected(IStatsService),
    clock: IClock = Injected(IClock),
    logger: BoundLogger = Injected(BoundLogger),
) -> WatchlistManager:
    return WatchlistManager(
        store=store,
        validator=validator,
        stats_service=stats_service,
        clock=clock,
        logger=logger,
    )
