"""Domain layer - plain value types shared by services and routes."""
from .gallery import GalleryItem, GallerySection

__all__ = [
    "GalleryItem",
    "GallerySection",
]
