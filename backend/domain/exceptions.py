class WatchlistError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WatchlistError):
    status_code = 422


class MovieNotFoundError(WatchlistError):
    status_code = 404

    def __init__(self, message: str = "Movie not found."):
        super().__init__(message)


class RouteNotFoundError(WatchlistError):
    status_code = 404

    def __init__(self, message: str = "Route not found. Use /movies or /stats."):
        super().__init__(message)
