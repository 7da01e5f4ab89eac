"""Dependency injection container for managing service dependencies"""

from collections.abc import Callable
from typing import Any

from ..config.settings import AppSettings
from ..config.settings import settings as default_settings
from .interfaces import (
    ClipboardReaderInterface,
    DefinitionCacheInterface,
    DictionaryClientInterface,
    NotifierInterface,
)


class DIContainer:
    """Simple dependency injection container"""

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}
        self._singletons: dict[type, Any] = {}

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        """Register a specific instance for an interface"""
        self._services[interface] = instance

    def register_factory(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Register a factory function for an interface"""
        self._factories[interface] = factory

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Register a singleton factory for an interface"""
        self._factories[interface] = factory
        # Mark as singleton (value set on first access)
        if interface not in self._singletons:
            self._singletons[interface] = None

    def get(self, interface: type[Any]) -> Any | None:
        """Get an instance of the requested interface"""
        if interface in self._services:
            return self._services[interface]

        if interface in self._singletons and self._singletons[interface] is not None:
            return self._singletons[interface]

        if interface in self._factories:
            instance = self._factories[interface]()

            if interface in self._singletons:
                self._singletons[interface] = instance

            return instance

        return None

    def has(self, interface: type[Any]) -> bool:
        """Check if the container can provide an instance of the interface"""
        return (
            interface in self._services
            or interface in self._factories
            or (
                interface in self._singletons
                and self._singletons[interface] is not None
            )
        )

    def clear(self) -> None:
        """Clear all registrations"""
        self._services.clear()
        self._factories.clear()
        self._singletons.clear()


def _create_cache(app_settings: AppSettings) -> DefinitionCacheInterface:
    from ..utils.cache_engine import MemoryStore, SqliteStore
    from ..utils.cache_manager import CacheManager, NoCacheManager

    if not app_settings.cache.enable_cache:
        return NoCacheManager()
    if app_settings.cache.disable_disk:
        return CacheManager(MemoryStore())
    return CacheManager(SqliteStore(app_settings.cache.db_path))


def _create_notifier(app_settings: AppSettings) -> NotifierInterface:
    from .notifier import DesktopNotifier, NullNotifier

    if not app_settings.notification.enable:
        return NullNotifier()
    return DesktopNotifier(
        app_name=app_settings.notification.app_name,
        icon_path=app_settings.notification.icon_path,
        timeout_ms=app_settings.notification.timeout_ms,
    )


def setup_default_container(app_settings: AppSettings | None = None) -> DIContainer:
    """Setup container with default implementations"""
    from .clipboard import ClipboardReader
    from .dictionary_client import DictionaryClient

    cfg = app_settings or default_settings
    container = DIContainer()

    container.register_singleton(ClipboardReaderInterface, lambda: ClipboardReader())
    container.register_singleton(
        DictionaryClientInterface,
        lambda: DictionaryClient(
            base_url=cfg.dictionary.base_url,
            timeout=cfg.dictionary.request_timeout,
            user_agent=cfg.dictionary.user_agent,
        ),
    )
    container.register_singleton(DefinitionCacheInterface, lambda: _create_cache(cfg))
    container.register_singleton(NotifierInterface, lambda: _create_notifier(cfg))

    return container
