"""Gallery value types for the place page."""
from dataclasses import dataclass
from typing import Mapping, Tuple


@dataclass(frozen=True)
class GalleryItem:
    """One displayable gallery entry."""
    image_url: str
    preview_url: str

    @classmethod
    def from_row(cls, row: Mapping) -> "GalleryItem":
        """Build item from a repository row dict."""
        return cls(image_url=row["image_url"], preview_url=row["preview_url"])


@dataclass(frozen=True)
class GallerySection:
    """Section title plus gallery items in display order.

    Items are captured as a tuple: the section keeps the order it was given
    and later changes to the caller's list do not show up here.
    """
    title: str
    items: Tuple[GalleryItem, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
