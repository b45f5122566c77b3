"""
Domain models and value objects.

Contains the KeyedCollection model.
"""

from src.core.domain.keyed_collection import KeyedCollection

__all__ = [
    "KeyedCollection",
]
