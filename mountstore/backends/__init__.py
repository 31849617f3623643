"""Storage backends for mountstore."""

from .base import Storage, StorageStore, Watchers, check_offset_and_count
from .empty import EmptyStorage, EmptyStorageStore
from .environment import EnvironmentStorage
from .memory import TreeMapStorage, TreeMapStorageStore
from .prefixed import PrefixedStorage
from .routing import (
    Route,
    RoutingStorage,
    RoutingStorageBuilder,
    RoutingStorageStore,
    RoutingStorageStoreBuilder,
)

__all__ = [
    "Storage",
    "StorageStore",
    "Watchers",
    "check_offset_and_count",
    "EmptyStorage",
    "EmptyStorageStore",
    "EnvironmentStorage",
    "TreeMapStorage",
    "TreeMapStorageStore",
    "PrefixedStorage",
    "Route",
    "RoutingStorage",
    "RoutingStorageBuilder",
    "RoutingStorageStore",
    "RoutingStorageStoreBuilder",
]
