from collections.abc import Iterator

from dependency_injector import containers, providers
from sqlalchemy.engine import Engine

from flashdeck.application.handler.api_handler import ApiHandler
from flashdeck.application.storage.facade import StorageFacade
from flashdeck.config import Settings, get_settings
from flashdeck.database import create_database_engine
from flashdeck.infrastructure.storage.in_memory_driver import InMemoryStorageDriver
from flashdeck.infrastructure.storage.sqlalchemy_driver import SqlAlchemyStorageDriver


def _database_engine(settings: Settings) -> Iterator[Engine]:
    engine = create_database_engine(settings)
    yield engine
    engine.dispose()


def _storage_backend(settings: Settings) -> str:
    return "in_memory" if settings.USE_IN_MEMORY_STORAGE else "sqlalchemy"


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Callable(get_settings)

    # Database engine, disposed by shutdown_resources()
    engine = providers.Resource(_database_engine, settings=settings)

    # Storage drivers
    sqlalchemy_storage_driver = providers.Singleton(
        SqlAlchemyStorageDriver,
        engine=engine,
        reset_schema=settings.provided.is_test_database,
    )
    in_memory_storage_driver = providers.Singleton(InMemoryStorageDriver)
    storage_driver = providers.Selector(
        providers.Callable(_storage_backend, settings=settings),
        sqlalchemy=sqlalchemy_storage_driver,
        in_memory=in_memory_storage_driver,
    )

    storage_facade = providers.Singleton(StorageFacade, driver=storage_driver)

    # Request handling
    api_handler = providers.Factory(ApiHandler, facade=storage_facade)


# Initialize container
container = Container()
