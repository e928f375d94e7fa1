import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

from marketmate.config import Config
from marketmate.db.database import Database
from marketmate.db.seed import seed_sample_data
from marketmate.routers import dashboard, health, products, sales
from marketmate.exceptions import (
    AppException,
    app_exception_handler,
    database_exception_handler,
    generic_exception_handler,
)

# Configure logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.db
    await database.connect()
    await database.create_tables()
    if Config.SEED_SAMPLE_DATA:
        await seed_sample_data(database)
    logger.info("Market Mate API started")
    yield
    await database.disconnect()


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(
        title="Market Mate API",
        version="1.0.0",
        description="Inventory and point-of-sale tracking for small businesses",
        lifespan=lifespan
    )
    app.state.db = database or Database()

    # Register exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(sales.router)
    app.include_router(dashboard.router)
    return app


app = create_app()
