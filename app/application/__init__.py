"""Application layer - business logic services.

This layer contains application services that orchestrate domain operations.
Services are independent of HTTP/FastAPI routing and can be tested in isolation.
"""

from .services.gallery_service import GalleryService

__all__ = [
    "GalleryService",
]
