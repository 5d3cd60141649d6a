import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from storefront.core.config import settings
from storefront.core.database import create_tables
from storefront.api.errors import register_exception_handlers
from storefront.api.routes import auth, categories, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage app lifecycle events.

    Startup: create missing tables unless migrations own the schema
    """
    if settings.AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Database tables are up to date")
    yield


app = FastAPI(
    title="Storefront Accounts API",
    description="User accounts and category preferences",
    version="1.0.0",
    lifespan=lifespan
)

# Browsers call this API from other origins
# Credentials stay off because the token travels in a header, not a cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(categories.router)


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {"message": "Storefront Accounts API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint - used by monitoring/deployment tools"""
    return {"status": "healthy"}
