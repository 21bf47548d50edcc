import sqlite3
from datetime import datetime

from . import config


def _adapt_datetime(dt: datetime) -> str:
    """Adapt datetime to ISO 8601 string for SQLite."""
    return dt.isoformat()


sqlite3.register_adapter(datetime, _adapt_datetime)


def create_connection() -> sqlite3.Connection:
    """Open a new database connection.

    Callers own the connection and must close it.
    """
    conn = sqlite3.connect(config.DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_db():
    """Initialize database schema"""
    db = create_connection()
    try:
        # Places shown on the place page
        db.execute("""
            CREATE TABLE IF NOT EXISTS places (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Gallery entries, position is display order
        db.execute("""
            CREATE TABLE IF NOT EXISTS place_gallery_items (
                id TEXT PRIMARY KEY,
                place_id TEXT NOT NULL,
                position INTEGER NOT NULL,
                image_url TEXT NOT NULL,
                preview_url TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (place_id) REFERENCES places(id) ON DELETE CASCADE
            )
        """)

        db.execute("""
            CREATE INDEX IF NOT EXISTS idx_gallery_items_place
            ON place_gallery_items(place_id, position)
        """)

        db.commit()
    finally:
        db.close()
