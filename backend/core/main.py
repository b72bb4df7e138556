from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from fastapi_injector import attach_injector
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import router
from domain.exceptions import RouteNotFoundError, WatchlistError

from .di import create_injector
from .log_config import setup_logging
from .responses import OrjsonResponse
from .settings import settings

STATIC_DIR = Path(__file__).resolve().parent.parent / "web_ui" / "static"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

load_dotenv()
setup_logging(dev_mode=not settings.log_json, level=settings.log_level)
# "/movies/" and "/stats/" are unmatched routes, not redirects
app = FastAPI(title="Movie Watchlist API", default_response_class=OrjsonResponse, redirect_slashes=False)

injector = create_injector()
attach_injector(app, injector)
app.include_router(router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    # preflight is answered for every path, matched or not
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(WatchlistError)
async def watchlist_error_handler(request: Request, exc: WatchlistError):
    return OrjsonResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        not_found = RouteNotFoundError()
        return OrjsonResponse({"error": not_found.message}, status_code=not_found.status_code)
    return OrjsonResponse({"error": str(exc.detail)}, status_code=exc.status_code)


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health_check():
    return {"status": "ok"}


def run():
    uvicorn.run("core.main:app", host=settings.host, port=settings.port)
