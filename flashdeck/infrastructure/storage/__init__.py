"""Storage drivers implementing the application's ``StorageDriver`` protocol."""

from .in_memory_driver import InMemoryStorageDriver
from .sqlalchemy_driver import SqlAlchemyStorageDriver

__all__ = ["InMemoryStorageDriver", "SqlAlchemyStorageDriver"]
