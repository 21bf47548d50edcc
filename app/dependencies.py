"""Shared dependencies.

Factory functions for creating services used by the routes.
"""
from .application.services import GalleryService
from .infrastructure.repositories import PlaceRepository, GalleryItemRepository


def get_gallery_service(db) -> GalleryService:
    """Create GalleryService with repositories."""
    return GalleryService(
        place_repository=PlaceRepository(db),
        gallery_item_repository=GalleryItemRepository(db)
    )
