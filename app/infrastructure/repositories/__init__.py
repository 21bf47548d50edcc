# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    repo = GalleryItemRepository(db)
    items = repo.get_by_place(place_id)
"""
from .base import Repository, ConnectionProtocol
from .place_repository import PlaceRepository
from .gallery_item_repository import GalleryItemRepository

__all__ = [
    "Repository",
    "ConnectionProtocol",
    "PlaceRepository",
    "GalleryItemRepository",
]
