"""Factory functions for creating configured instances"""

from typing import cast

from ..exceptions import ConfigurationError
from .container import DIContainer, setup_default_container
from .interfaces import (
    ClipboardReaderInterface,
    DefinitionCacheInterface,
    DictionaryClientInterface,
    NotifierInterface,
)
from .watcher import ClipboardWatcher


def create_watcher(
    container: DIContainer | None = None,
    poll_interval: float | None = None,
) -> ClipboardWatcher:
    """Create a clipboard watcher from a DI container"""
    container = container or setup_default_container()

    required = {
        "clipboard": ClipboardReaderInterface,
        "dictionary_client": DictionaryClientInterface,
        "cache": DefinitionCacheInterface,
        "notifier": NotifierInterface,
    }
    services = {name: container.get(iface) for name, iface in required.items()}
    missing = [name for name, service in services.items() if service is None]
    if missing:
        raise ConfigurationError(
            "container", missing, "required services are not registered"
        )

    return ClipboardWatcher(
        clipboard=cast(ClipboardReaderInterface, services["clipboard"]),
        dictionary_client=cast(
            DictionaryClientInterface, services["dictionary_client"]
        ),
        cache=cast(DefinitionCacheInterface, services["cache"]),
        notifier=cast(NotifierInterface, services["notifier"]),
        poll_interval=poll_interval,
    )
