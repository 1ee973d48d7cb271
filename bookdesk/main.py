"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookdesk.api.v1 import api_router
from bookdesk.core.config import get_settings
from bookdesk.core.database import Database
from bookdesk.core.errors import AppError, ServerError
from bookdesk.services.notifications import EmailNotifier

_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Startup: build the shared handles (use Alembic for the schema in production)
    db = Database(_settings.database_url)
    await db.create_all()
    app.state.db = db
    app.state.notifier = EmailNotifier(
        api_url=_settings.email_api_url,
        api_key=_settings.email_api_key,
        sender=_settings.email_from,
    )
    yield
    await app.state.notifier.aclose()
    await db.dispose()


app = FastAPI(
    title="bookdesk",
    version="0.1.0",
    description="Multi-tenant appointment scheduling for small service businesses",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error responses ──────────────────────────────────────────

@app.exception_handler(AppError)
async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"field": ".".join(str(p) for p in err["loc"][1:]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "code": "validation_error", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    err = ServerError()
    return JSONResponse(
        status_code=err.status_code,
        content={"message": err.message, "code": err.code},
    )


# ── API routes ───────────────────────────────────────────────
app.include_router(api_router)


@app.get("/health", tags=["system"])
async def health_check() -> dict:
    return {"status": "ok"}
