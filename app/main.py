import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.exceptions import FormValidationException
from app.database import create_tables
from app.dependencies import get_store
from app.routers import artist, dashboard, favorites, onboard
from app.services.storage_service import StorageError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} (storage: {settings.storage_backend})...")
    if settings.storage_backend == "database":
        await create_tables()
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    await close_store()


async def close_store() -> None:
    """Release the shared document store's connections (Redis client)."""
    store = get_store()
    close = getattr(store, "close", None)
    if close is not None:
        await close()
    get_store.cache_clear()


app = FastAPI(
    title=settings.app_name,
    description="API for Artistly - Performing artist booking platform",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS Middleware - configure for your frontend domain in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FormValidationException)
async def form_validation_handler(request: Request, exc: FormValidationException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "errors": exc.errors},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Storage is unavailable. Please try again."},
    )


# Include routers
app.include_router(
    artist.router,
    prefix=settings.api_v1_prefix,
    tags=["Directory"]
)
app.include_router(
    onboard.router,
    prefix=f"{settings.api_v1_prefix}/onboard",
    tags=["Onboarding"]
)
app.include_router(
    dashboard.router,
    prefix=f"{settings.api_v1_prefix}/dashboard",
    tags=["Dashboard"]
)
app.include_router(
    favorites.router,
    prefix=f"{settings.api_v1_prefix}/favorites",
    tags=["Favorites"]
)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
