# Import all models so create_all can detect them
from app.models.artist import StoredCollection

__all__ = [
    "StoredCollection",
]
