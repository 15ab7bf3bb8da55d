"""FastAPI application."""

import asyncio
import logging
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cardiac.config import Settings
from cardiac.interface.api.routes import admin, auth, coins, health, share, votes
from cardiac.util.di.container import create_container, setup_di
from cardiac.util.observability import instrument_fastapi, instrument_httpx
from cardiac.util.usage import ApiUsageCounter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the upstream usage counter reset for the life of the process."""
    container: AsyncContainer = app.state.dishka_container
    usage_counter = await container.get(ApiUsageCounter)
    reset_task = asyncio.create_task(usage_counter.run_periodic_reset())

    yield

    reset_task.cancel()
    try:
        await reset_task
    except asyncio.CancelledError:
        pass
    await container.close()


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures are logged and reported without internals."""
    logger.exception(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one built from mock providers.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Crypto Cardiac API",
        description="Backend API for Crypto Cardiac - daily community voting on cryptocurrencies",
        version="1.0.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(SQLAlchemyError, storage_error_handler)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(share.router)
    app_instance.include_router(coins.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
