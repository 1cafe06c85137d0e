from tortoise import Tortoise
from tortoise.contrib.fastapi import RegisterTortoise
from stocktrack.core.config import DB_URL
import logging
from logging import INFO

# Set logging level for Tortoise ORM
logging.getLogger('tortoise').setLevel(INFO)
log = logging.getLogger(__name__)

# Define all models modules for the ORM
MODELS_MODULES = [
    "stocktrack.models.user",
    "stocktrack.models.category",
    "stocktrack.models.inventory",
]

async def init_db(db_url: str = None):
    """Initializes the Tortoise ORM connection and generates schemas. Used by the seed script and tests."""
    db_url = db_url or DB_URL
    try:
        await Tortoise.init(
            db_url=db_url,
            modules={"models": MODELS_MODULES},
        )
        # Generate the database schema (create tables and indexes if missing)
        await Tortoise.generate_schemas(safe=True)
        log.info("Database connection established and schemas generated.")
    except Exception as e:
        log.error(f"FATAL ERROR: Could not connect to database. Error: {e}")
        # Re-raise to prevent the application from starting without a database
        raise

async def close_db():
    """Closes all database connections."""
    await Tortoise.close_connections()
    log.info("Database connections closed.")

def register_db(app, db_url: str = None) -> RegisterTortoise:
    """
    Binds the ORM to the app for the lifetime of the server.

    Use as ``async with register_db(app):`` inside the lifespan. Connections
    made here are visible to request handlers, which run in other tasks than
    the lifespan does. Connections are closed on exit.
    """
    return RegisterTortoise(
        app,
        db_url=db_url or DB_URL,
        modules={"models": MODELS_MODULES},
        generate_schemas=True,
    )
