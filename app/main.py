"""Place Gallery Application - FastAPI Entry Point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import ROOT_PATH
from .database import init_db

# Import routers
from .routes.places import router as places_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: runs before the application starts accepting requests
    init_db()
    yield


app = FastAPI(title="Place Gallery", root_path=ROOT_PATH, lifespan=lifespan)

# Include routers
app.include_router(places_router)
