"""Client side of the catalog: HTTP wrapper and view state."""

from .http_client import CatalogClient
from .view import BookDraft, CatalogView

__all__ = ["BookDraft", "CatalogClient", "CatalogView"]
