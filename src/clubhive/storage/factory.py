from __future__ import annotations

import logging
from typing import Any

from ..core.constants import DEFAULT_STORE_NAMESPACE
from ..database.connection import DBConfig, DatabaseConnection
from .json_file_store import JsonFileStore
from .mapping import MAPPINGS, MappedStore
from .memory_store import InMemoryStore
from .mysql_store import MySQLStore
from .store import CollectionStore

logger = logging.getLogger(__name__)


def build_store(settings: Any) -> CollectionStore:
    """Create the store selected by ``STORE_BACKEND`` on a settings module."""
    backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
    namespace = str(getattr(settings, "STORE_NAMESPACE", DEFAULT_STORE_NAMESPACE))

    store: CollectionStore
    if backend == "memory":
        store = InMemoryStore(namespace)
    elif backend == "json":
        store = JsonFileStore(getattr(settings, "STORE_PATH", "instance/store"), namespace)
    elif backend == "mysql":
        config = DBConfig.from_mapping(getattr(settings, "DB_CONFIG"))
        store = MySQLStore(DatabaseConnection.get_instance(config), namespace)
    else:
        raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")

    legacy = getattr(settings, "STORE_LEGACY_FIELDS", None)
    if legacy:
        try:
            mapping = MAPPINGS[str(legacy).lower()]
        except KeyError:
            raise ValueError(f"Unknown STORE_LEGACY_FIELDS: {legacy!r}")
        store = MappedStore(store, mapping)

    logger.info("Store backend=%s namespace=%s legacy_fields=%s", backend, namespace, legacy or "-")
    return store
