"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.responses import GENERIC_ERROR_DETAIL
from src.bookstore.api.http.routers.authors import router as authors_router
from src.bookstore.api.http.routers.books import router as books_router
from src.bookstore.api.http.routers.users import router as users_router
from src.bookstore.api.utils.app_startup import configure_logging
from src.bookstore.core.exceptions import BookstoreError
from src.bookstore.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    seed_identities,
)
from src.bookstore.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title=get_config().app.name,
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

app.add_middleware(SecurityHeadersMiddleware)

__all__ = ["app", "startup", "shutdown", "build_dependencies"]

# --- CORS configuration ---
if get_config().app.environment == "production" and (
    "*" in get_config().app.cors.origins and get_config().app.cors.allow_credentials
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


def _error_response(status_code: int, detail, request_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": request_id},
        headers={"X-Request-ID": request_id},
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return _error_response(500, GENERIC_ERROR_DETAIL, request_id)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error_response(exc.status_code, exc.detail, _request_id(request))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.bind(error_type=type(exc).__name__).warning("request.validation_error")
    return _error_response(422, jsonable_encoder(exc.errors()), _request_id(request))


@app.exception_handler(BookstoreError)
async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    # Store diagnostics stay in the log, never in the response body
    logger.bind(error_type=type(exc).__name__).error("request.failed: {}", exc)
    return _error_response(500, GENERIC_ERROR_DETAIL, _request_id(request))


# --- Router registration ---
app.include_router(authors_router)
app.include_router(books_router)
app.include_router(users_router)


# --- Lifecycle hooks ---
def build_dependencies() -> ApplicationDependencies:
    """Create the process-wide services from the active configuration.

    Raises:
        ConfigurationError: If the JWT signing key is missing or too short
    """
    config = get_config()
    # Token services first: a bad signing key must stop startup before any I/O
    token_issuer = JwtGeneratorService(config.jwt)
    token_verifier = JwtVerificationService(config.jwt)
    database_service = DbSessionService(config.database)
    return ApplicationDependencies(
        database_service=database_service,
        token_issuer=token_issuer,
        token_verifier=token_verifier,
    )


async def startup() -> None:
    config = get_config()
    configure_logging(config)
    logger.info("Starting up application in {} environment", config.app.environment)

    deps = build_dependencies()
    deps.database_service.create_all()

    if config.seed.enabled:
        with deps.database_service.session_scope() as session:
            seed_identities(session, config.seed, bcrypt_rounds=config.security.bcrypt_rounds)

    app.state.app_dependencies = deps


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


# --- Route handlers ---


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {"status": "healthy"}


@app.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, str] | JSONResponse:
    """Readiness probe; 503 while the database is unreachable."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    if not app_deps.database_service.health_check():
        return JSONResponse(
            status_code=503, content={"status": "unavailable", "database": "unhealthy"}
        )
    return {"status": "ready", "database": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # Access logging happens in middleware
    )
