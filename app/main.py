"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.exceptions import ServiceError
from app.core.rate_limit import AuthRateLimitMiddleware, get_auth_rate_limiter
from app.schemas.auth import INVALID_CREDENTIALS_MESSAGE

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Daily Menu API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

LOGIN_PATH = f"{settings.API_V1_PREFIX}/login"
REGISTER_PATH = f"{settings.API_V1_PREFIX}/register"

app.state.auth_limiter = get_auth_rate_limiter()
app.add_middleware(AuthRateLimitMiddleware, paths=(LOGIN_PATH, REGISTER_PATH))
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=settings.APP_ENV != "dev",
    allow_methods=["*"],
    allow_headers=["*"],
)


def validation_error_message(exc: RequestValidationError) -> str:
    """One human-readable message for the first failing field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    if first.get("type") == "missing":
        field = str(first["loc"][-1]) if first.get("loc") else "field"
        return f"{field} is required."
    return str(first.get("msg", "Invalid request."))


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if request.url.path == LOGIN_PATH:
        message = INVALID_CREDENTIALS_MESSAGE
    else:
        message = validation_error_message(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Storage and runtime details stay in the log.
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


app.include_router(v1_router, prefix=settings.API_V1_PREFIX)

Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Daily Menu API"}
