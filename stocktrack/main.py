import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from stocktrack.core.db import register_db
from stocktrack.api.v1.auth import router as auth_router
from stocktrack.api.v1.categories import router as categories_router
from stocktrack.api.v1.inventory import router as inventory_router
from stocktrack.core.config import LOG_LEVEL, PROJECT_NAME, VERSION
from stocktrack.core.exception_handlers import setup_exception_handlers

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION}...")
    async with register_db(app):  # Connect to DB and generate schemas
        yield
    log.info(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers for modular API structure
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(categories_router, prefix="/api/categories", tags=["Categories"])
app.include_router(inventory_router, prefix="/api/inventory", tags=["Inventory"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}
