"""Main FastAPI application for the collaborative todo API."""

import logging
import time
import uuid
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from api import responses
from api.routes import router as api_router
from core.logging_utils import configure_logging, reset_request_id, set_request_id
from core.settings import get_app_settings
from services.errors import InvalidInputError, TodoServiceError

API_VERSION = "1.0.0"
ROOT = Path(__file__).resolve().parent

settings = get_app_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Collaborative todo list with todos assigned to seeded users",
    version=API_VERSION,
)


@app.exception_handler(TodoServiceError)
async def todo_service_exception_handler(request: Request, exc: TodoServiceError) -> JSONResponse:
    if isinstance(exc, InvalidInputError):
        return responses.error_validator(exc.message)
    # missing todos and unknown owners are both reported as not found
    return responses.error_not_found(exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    locations = {error.get("loc", ("body",))[0] for error in errors}
    if "path" in locations:
        return responses.error_bad_request(errors[0].get("msg"), "Invalid todo ID")
    if "query" in locations:
        return responses.error_bad_request(errors[0].get("msg"), "Invalid user_id parameter")
    return responses.error_validator(responses.describe_body_errors(errors))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return responses.error_server(f"{type(exc).__name__}: {exc}")


@app.middleware("http")
async def access_log_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.middleware("http")
async def preflight_bypass_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200)
    return await call_next(request)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)


@app.get("/health")
def health() -> JSONResponse:
    """Health check endpoint."""
    return responses.success(
        responses.GET,
        {"status": "healthy", "service": settings.app_name},
        "Service is running",
    )


@app.get("/api")
def api_info() -> JSONResponse:
    """API information endpoint."""
    info = {
        "name": settings.app_name,
        "version": API_VERSION,
        "endpoints": {
            "GET /users": "Get all users",
            "GET /todos": "Get all todos (optional: ?user_id=1 to filter by user)",
            "GET /todos/{id}": "Get a single todo",
            "POST /todos": "Create a new todo (user_id must exist)",
            "DELETE /todos/{id}": "Delete a todo",
            "PUT /todos/{id}": "Update a todo",
            "PATCH /todos/{id}/toggle": "Toggle todo completed status",
            "GET /health": "Health check",
            "GET /api": "API documentation",
            "GET /": "Web interface",
        },
    }
    return responses.success(responses.GET, info, f"Welcome to {settings.app_name}")


@app.get("/", response_model=None)
def frontend() -> FileResponse | JSONResponse:
    """Serve the web interface."""
    views_dir = Path(settings.views_dir)
    if not views_dir.is_absolute():
        views_dir = ROOT / views_dir
    index_path = views_dir / "index.html"
    if not index_path.is_file():
        return responses.error_not_found("index.html is missing", "Web interface not available")
    return FileResponse(index_path)


app.include_router(api_router)
