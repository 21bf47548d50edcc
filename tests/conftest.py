"""Test configuration and fixtures for Place Gallery.

This module provides isolated test environments:
- Temporary database (SQLite) with fresh schema per test
- Test client bound to that database
"""
import sys
from pathlib import Path
from typing import Generator, Dict

import pytest
from fastapi.testclient import TestClient

# Ensure app is importable
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(scope="function")
def patched_config(tmp_path: Path) -> Generator[Path, None, None]:
    """Point app configuration at a temporary database."""
    import app.config as config

    original_db = config.DATABASE_PATH
    config.DATABASE_PATH = tmp_path / "test.db"

    yield config.DATABASE_PATH

    config.DATABASE_PATH = original_db


@pytest.fixture(scope="function")
def fresh_database(patched_config: Path) -> Path:
    """Initialize fresh database with schema for each test."""
    from app.database import init_db

    init_db()
    return patched_config


@pytest.fixture(scope="function")
def db(fresh_database: Path):
    """Open connection to the fresh test database."""
    from app.database import create_connection

    conn = create_connection()
    yield conn
    conn.close()


@pytest.fixture(scope="function")
def client(fresh_database: Path) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/places/abc/gallery")
            assert response.status_code == 404
    """
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def test_place(db) -> Dict:
    """Create a place with two gallery items.

    Returns:
        Dict with: id, name, items (list of item dicts in display order)
    """
    from app.infrastructure.repositories import PlaceRepository, GalleryItemRepository

    place_id = PlaceRepository(db).create("Old Town Square")
    item_repo = GalleryItemRepository(db)
    items = [
        {"image_url": "https://img.example.com/1.jpg", "preview_url": "https://img.example.com/1_s.jpg"},
        {"image_url": "https://img.example.com/2.jpg", "preview_url": "https://img.example.com/2_s.jpg"},
    ]
    for item in items:
        item_repo.add(place_id, item["image_url"], item["preview_url"])

    return {"id": place_id, "name": "Old Town Square", "items": items}


@pytest.fixture(scope="function")
def empty_place(db) -> str:
    """Create a place without gallery items."""
    from app.infrastructure.repositories import PlaceRepository

    return PlaceRepository(db).create("Empty Lot")
