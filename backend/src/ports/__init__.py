# Ports layer - Abstract interfaces (Protocols)

from .collection_store import CollectionStore

__all__ = ["CollectionStore"]
