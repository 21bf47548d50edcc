"""Place page routes - read-only gallery section rendering."""
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..database import create_connection
from ..dependencies import get_gallery_service
from ..domain import GallerySection

router = APIRouter(prefix="/places", tags=["places"])


class GalleryItemResponse(BaseModel):
    image_url: str
    preview_url: str


class GallerySectionResponse(BaseModel):
    title: str
    items: List[GalleryItemResponse]

    @classmethod
    def from_section(cls, section: GallerySection) -> "GallerySectionResponse":
        """Serialize a section, keeping item order."""
        return cls(
            title=section.title,
            items=[
                GalleryItemResponse(image_url=item.image_url, preview_url=item.preview_url)
                for item in section.items
            ]
        )


@router.get("/{place_id}/gallery", response_model=GallerySectionResponse)
def get_place_gallery(place_id: str, title: Optional[str] = None):
    """Gallery section for the place page.

    Pass `title` to override the configured section heading.
    """
    db = create_connection()
    try:
        section = get_gallery_service(db).build_section(place_id, title=title)
    finally:
        db.close()

    return GallerySectionResponse.from_section(section)
