import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from playlist_api.api import playlists_router
from playlist_api.core.errors import PlaylistApiError
from playlist_api.core.logging_config import configure_logging

configure_logging()

app = FastAPI(title="Playlist API")

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Sorry, something went wrong on our server."


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "fail", "message": message})


@app.exception_handler(PlaylistApiError)
async def playlist_api_error_handler(request: Request, exc: PlaylistApiError):
    logger.info(
        "Request refused path=%s operation=%s error=%s",
        request.url.path,
        exc.operation,
        type(exc).__name__,
    )
    return _fail(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid payload") if errors else "Invalid payload"
    return _fail(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _fail(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error path=%s", request.url.path)
    return _fail(500, SERVER_ERROR_MESSAGE)


@app.middleware("http")
async def request_tracing_middleware(request: Request, call_next):
    request_id = uuid.uuid4().hex[:8]
    method = request.method
    path = request.url.path
    logger.info("REQ_START %s %s %s", request_id, method, path)
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as err:
        logger.error("REQ_ERR %s %s %s %s", request_id, method, path, err)
        raise
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "REQ_END %s %s %s %s %.2fms",
        request_id,
        method,
        path,
        response.status_code,
        elapsed_ms,
    )
    return response


app.include_router(playlists_router, prefix="/playlists")


@app.get("/health")
def health():
    return {"ok": True}
