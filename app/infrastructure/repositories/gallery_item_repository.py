"""Gallery item repository - image references attached to places.

Rows live in the 'place_gallery_items' table. The 'position' column is
the display order inside a place's gallery; rows sharing a position keep
insertion order.
"""
import uuid
from datetime import datetime
from typing import List, Dict

from .base import Repository


class GalleryItemRepository(Repository):
    """Repository for place gallery items."""

    def add(
        self,
        place_id: str,
        image_url: str,
        preview_url: str,
        position: int = None
    ) -> str:
        """Attach a gallery item to a place.

        Args:
            place_id: Owning place
            image_url: Full-size image reference
            preview_url: Preview image reference
            position: Display position (appended at the end if not provided)

        Returns:
            New item UUID
        """
        if position is None:
            cursor = self._execute(
                "SELECT COALESCE(MAX(position), -1) + 1 AS next_pos "
                "FROM place_gallery_items WHERE place_id = ?",
                (place_id,)
            )
            position = cursor.fetchone()["next_pos"]

        item_id = str(uuid.uuid4())
        self._execute(
            """INSERT INTO place_gallery_items
               (id, place_id, position, image_url, preview_url, created_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (item_id, place_id, position, image_url, preview_url, datetime.now())
        )
        self._commit()
        return item_id

    def get_by_place(self, place_id: str) -> List[Dict]:
        """Get place's gallery items in display order."""
        cursor = self._execute(
            """SELECT id, place_id, position, image_url, preview_url
               FROM place_gallery_items
               WHERE place_id = ?
               ORDER BY position, rowid""",
            (place_id,)
        )
        return [dict(row) for row in cursor.fetchall()]

    def count_by_place(self, place_id: str) -> int:
        """Count gallery items of a place."""
        cursor = self._execute(
            "SELECT COUNT(*) AS count FROM place_gallery_items WHERE place_id = ?",
            (place_id,)
        )
        return cursor.fetchone()["count"]

    def delete(self, item_id: str) -> bool:
        """Remove a gallery item."""
        cursor = self._execute(
            "DELETE FROM place_gallery_items WHERE id = ?",
            (item_id,)
        )
        self._commit()
        return cursor.rowcount > 0
