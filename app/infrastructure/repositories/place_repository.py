"""Place repository - places shown on the place page."""
import uuid
from datetime import datetime
from typing import Optional, Dict

from .base import Repository


class PlaceRepository(Repository):
    """Repository for places."""

    def create(self, name: str, place_id: str = None) -> str:
        """Create a new place.

        Args:
            name: Display name
            place_id: Optional ID (UUID generated if not provided)

        Returns:
            Place ID
        """
        if place_id is None:
            place_id = str(uuid.uuid4())

        self._execute(
            "INSERT INTO places (id, name, created_at) VALUES (?, ?, ?)",
            (place_id, name, datetime.now())
        )
        self._commit()
        return place_id

    def get_by_id(self, place_id: str) -> Optional[Dict]:
        """Get place by ID."""
        cursor = self._execute("SELECT * FROM places WHERE id = ?", (place_id,))
        return self._row_to_dict(cursor.fetchone())

    def delete(self, place_id: str) -> bool:
        """Delete place and its gallery items."""
        cursor = self._execute("DELETE FROM places WHERE id = ?", (place_id,))
        self._commit()
        return cursor.rowcount > 0
