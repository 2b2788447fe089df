# /app/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings, get_settings
from .db.database import DatabaseHandle

# --- Application-specific Router Imports ---
from .routers import (
    signup_router,
    analytics_router,
    admin_router,
)

# --- Service Imports for Startup Logic ---
from .services.database_service import DatabaseService
from .services.database_helpers.store_errors import StoreError

logger = logging.getLogger(__name__)


def _prepare_store(handle: DatabaseHandle, settings: Settings):
    """Creates tables when asked to and makes sure the challenge catalog is seeded."""
    if not handle.is_configured:
        logger.warning("DATABASE_URL is not set; signups are disabled and analytics will be empty")
        return

    session = handle.new_session()
    try:
        if settings.AUTO_CREATE_SCHEMA:
            handle.create_schema()
        added = DatabaseService(db_session=session).ensure_challenge_catalog()
        if added:
            logger.info("Seeded %d challenge catalog entries", added)
    except SQLAlchemyError:
        logger.exception("Could not create the database schema")
    except StoreError as e:
        # The API still starts; signups report StoreNotProvisioned until migrations run.
        logger.error("Could not seed the challenge catalog (%s): %s", e.kind.value, e.message)
    finally:
        session.close()


def create_app(settings: Settings = None, db_handle: DatabaseHandle = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # This code runs ONCE when the application starts up.
        handle = db_handle or DatabaseHandle(settings.DATABASE_URL)
        app.state.db_handle = handle
        _prepare_store(handle, settings)
        yield
        # This code runs ONCE when the application shuts down.
        handle.dispose()

    # --- FastAPI Application Instance Creation ---
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Waitlist signups and learning-challenge analytics.",
        version=settings.VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- API Router Inclusion ---
    app.include_router(signup_router.router, prefix="/api/signups", tags=["Signups"])
    app.include_router(analytics_router.router, prefix="/api", tags=["Analytics"])
    app.include_router(admin_router.router, prefix="/api/admin", tags=["Admin"])

    # --- Root / Health Check Endpoint ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {
            "status": "Waitlist API is running!",
            "version": app.version,
            "databaseConfigured": app.state.db_handle.is_configured,
        }

    return app


app = create_app()
