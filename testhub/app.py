"""Main FastAPI application with modularized routes."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from core.logging_setup import setup_console_logging
from testhub.config import CORS_ORIGINS, LOG_LEVEL, STATIC_DIR
from testhub.database import close_db, init_db
from testhub.routes import results, system, tests
from testhub.utils import describe_validation_errors

setup_console_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the store on startup, release it on shutdown."""
    init_db()
    yield
    close_db()


app = FastAPI(title="Test Hub API", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return _failure(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.error(f"{request.method} {request.url.path} rejected: {message}")
    return _failure(500, message)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} database error", exc_info=exc)
    return _failure(500, "Database operation failed")


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Server error on {request.method} {request.url.path}", exc_info=exc)
    return _failure(500, "Internal server error")


# Root endpoint
@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve frontend index.html."""
    index_path = STATIC_DIR / "index.html"
    if not index_path.exists():
        raise HTTPException(status_code=404, detail="Frontend not found")
    return FileResponse(index_path)


# Mount static files
if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(tests.router)
app.include_router(results.router)
app.include_router(system.router)


CATCH_ALL_PATH = "/{path:path}"


def _matches_route(request: Request, path: str) -> bool:
    scope = {**request.scope, "path": path}
    for route in request.app.router.routes:
        if getattr(route, "path", None) == CATCH_ALL_PATH:
            continue
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return True
    return False


# Must stay last: anything not matched above
@app.api_route(
    CATCH_ALL_PATH,
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    include_in_schema=False,
)
def route_not_found(request: Request, path: str) -> Response:
    stripped = request.url.path.rstrip("/")
    if stripped and stripped != request.url.path and _matches_route(request, stripped):
        return RedirectResponse(request.url.replace(path=stripped), status_code=307)
    return _failure(404, "Route not found")
