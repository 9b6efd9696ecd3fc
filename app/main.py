"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.config import settings
from app.core.exceptions import SlugExhaustedError
from app.database import init_db, close_db, engine
from app.localization.helpers import get_locale_from_request, get_translation
from app.logging_config import setup_logging
from app.middleware.metrics import setup_metrics
from app.api.v1 import auth, monuments, portal

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    await init_db()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")
    yield
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_metrics(app)


@app.exception_handler(SlugExhaustedError)
async def slug_exhausted_handler(request: Request, exc: SlugExhaustedError):
    """Report suffix exhaustion as a server error; it is never retried."""
    logger.error(f"{exc} ({request.method} {request.url.path})")
    locale = get_locale_from_request(request)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": get_translation("errors.slug_exhausted", locale, slug=exc.base_slug)},
    )


app.include_router(auth.router, prefix=f"{settings.API_V1_PREFIX}/auth", tags=["auth"])
app.include_router(
    monuments.router, prefix=f"{settings.API_V1_PREFIX}/monuments", tags=["monuments"]
)
app.include_router(portal.router, prefix=f"{settings.API_V1_PREFIX}/portal", tags=["portal"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    health_status = {"status": "ok", "checks": {"database": "unknown"}}

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        health_status["checks"]["database"] = "ok"
    except Exception as e:
        health_status["checks"]["database"] = f"error: {str(e)}"
        health_status["status"] = "degraded"

    return health_status
