# Adapters layer - Concrete implementations (in-memory store, sample data)

from .in_memory_store import InMemoryCollectionStore
from .sample_sets import load_sample_sets

__all__ = [
    "InMemoryCollectionStore",
    "load_sample_sets",
]
