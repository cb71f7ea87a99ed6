"""
Domain common module.

Contains base classes for domain modeling:
- EntityId: Store-assigned identity wrapped in its own type per entity
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId

__all__ = [
    "Entity",
    "EntityId",
]
