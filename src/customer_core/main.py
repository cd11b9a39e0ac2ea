# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Customer Service - Main Application Module.

``create_app`` is the composition root: it picks the customer data-access
implementation from settings and injects it, together with the password
hasher, into ``CustomerService``.
"""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager

import uvicorn
from beartype import beartype
from fastapi import FastAPI

from . import __version__
from .api.v1 import router as v1_router
from .core.config import Settings, get_settings
from .core.database import Database, DatabaseConfig
from .core.logging_utils import configure_logging, get_logger
from .core.security import PasswordHasher
from .dao.customer_dao import CustomerDao
from .dao.memory import InMemoryCustomerDao
from .dao.postgres import PostgresCustomerDao
from .services.customer_service import CustomerService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s in %s mode (store=%s)",
        settings.app_name,
        settings.api_env,
        settings.customer_store,
    )

    database: Database | None = app.state.database
    if database is not None:
        await database.connect()

    yield

    logger.info("Shutting down %s", settings.app_name)
    if database is not None:
        await database.disconnect()


@beartype
def create_app(
    settings: Settings | None = None,
    customer_dao: CustomerDao | None = None,
    password_hasher: Callable[[str], str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        customer_dao: Data-access implementation overriding ``customer_store``
        password_hasher: Hash function overriding the bcrypt hasher

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)
    get_logger(level=logging.getLevelName(settings.log_level))

    database: Database | None = None
    if customer_dao is None:
        if settings.customer_store == "postgres":
            database = Database(DatabaseConfig.from_settings(settings))
            customer_dao = PostgresCustomerDao(database)
        else:
            customer_dao = InMemoryCustomerDao()

    if password_hasher is None:
        password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    app = FastAPI(
        title=settings.app_name,
        description="Customer record management service",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.customer_service = CustomerService(customer_dao, password_hasher)

    app.include_router(v1_router)

    return app


# Create the application instance
app = create_app()


@beartype
def main() -> None:
    """Run the main application entry point."""
    settings = get_settings()

    uvicorn.run(
        "customer_core.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level="info" if not settings.is_production else "error",
    )


if __name__ == "__main__":
    main()
