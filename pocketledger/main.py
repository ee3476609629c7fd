"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pocketledger import __version__
from pocketledger.config import settings
from pocketledger.api.router import api_router
from pocketledger.errors import InitializationError, StorageError, ValidationError
from pocketledger.store import LedgerStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the ledger store for the lifetime of the process."""
    # Opened lazily by the first request that needs it
    store = LedgerStore(settings.database_url, echo=settings.sql_echo)
    app.state.store = store
    try:
        yield
    finally:
        store.close()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Local personal finance ledger with monthly and annual reports",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Ledger storage error"})


@app.exception_handler(InitializationError)
async def initialization_error_handler(request: Request, exc: InitializationError):
    logger.error(f"Ledger unavailable on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Ledger database unavailable"})


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }
