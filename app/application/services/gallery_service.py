"""Gallery service - assembles place page gallery sections."""
import logging
from typing import Optional

from fastapi import HTTPException

from ... import config
from ...domain import GalleryItem, GallerySection
from ...infrastructure.repositories import PlaceRepository, GalleryItemRepository

logger = logging.getLogger(__name__)


class GalleryService:
    """Service for building gallery sections.

    Responsibilities:
    - Resolve the section title (explicit or configured default)
    - Load a place's gallery items in display order
    - Hand back a ready-to-render GallerySection

    A place without items gets a section with no items. Callers that have
    not loaded a gallery yet should hold None, not an empty section.
    """

    def __init__(
        self,
        place_repository: PlaceRepository,
        gallery_item_repository: GalleryItemRepository
    ):
        self.place_repo = place_repository
        self.item_repo = gallery_item_repository

    def build_section(self, place_id: str, title: Optional[str] = None) -> GallerySection:
        """Build the gallery section for a place.

        Args:
            place_id: Place to build the gallery for
            title: Section heading; None means the configured default.
                An empty string is kept as is.

        Returns:
            GallerySection with items in display order

        Raises:
            HTTPException: 404 if place doesn't exist
        """
        place = self.place_repo.get_by_id(place_id)
        if not place:
            logger.info("Gallery requested for unknown place %s", place_id)
            raise HTTPException(404, "Place not found")

        if title is None:
            title = config.DEFAULT_GALLERY_TITLE

        rows = self.item_repo.get_by_place(place_id)
        section = GallerySection(title=title, items=[GalleryItem.from_row(row) for row in rows])

        logger.debug(
            "Built gallery section for place %s: title=%r, %d items",
            place_id, section.title, len(section.items)
        )
        return section
