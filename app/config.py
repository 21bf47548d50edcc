"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database location, override with PLACE_GALLERY_DB
DATABASE_PATH = Path(os.environ.get("PLACE_GALLERY_DB", str(BASE_DIR / "gallery.db")))

# Base URL configuration (for running under a subpath like /places)
# Set via environment variable PLACE_GALLERY_BASE_URL, e.g., "maps" or "/maps"
BASE_URL = os.environ.get("PLACE_GALLERY_BASE_URL", "").strip("/")
ROOT_PATH = f"/{BASE_URL}" if BASE_URL else ""

# Heading shown above the gallery when the caller doesn't pass one
DEFAULT_GALLERY_TITLE = os.environ.get("PLACE_GALLERY_TITLE", "Photos")
