"""
mountstore - a virtual, hierarchical key-value namespace.

Values are addressed by slash separated paths such as "/docs/reports/q1.txt".
Several backing stores can be mounted under path prefixes and used as one
namespace, much like mounting filesystems.

Quick Start:
    from mountstore import StorageContext, StoragePath, StorageValue, mount

    context = StorageContext(user="user@example.com")
    storage = mount({
        "/docs": "memory://",
        "/env": "env://",
    })

    path = StoragePath.parse("/docs/reports/q1.txt")
    storage.save(StorageValue(path, "revenue up", "text/plain"), context)

    storage.load(path, context)                                      # the value
    storage.list(StoragePath.parse("/docs"), 0, 10, context)        # /docs/reports

Key Classes:
    - StoragePath, StorageName: Paths and path segments
    - StorageValue, StorageValueInfo, AuditInfo: Stored values and metadata
    - StorageContext: User, clock and environment values for operations
    - Storage, StorageStore: The store interfaces

Backends:
    - TreeMapStorage, TreeMapStorageStore: In-memory hierarchical storage
    - RoutingStorage, RoutingStorageStore: Mount tables
    - PrefixedStorage: A storage exposed under a prefix
    - EnvironmentStorage: Environment values as storage
    - EmptyStorage, EmptyStorageStore: Nothing stored, writes refused
"""

from .path import SEPARATOR, StorageName, StoragePath
from .value import DEFAULT_CONTENT_TYPE, AuditInfo, StorageValue, StorageValueInfo
from .context import EnvironmentValues, StorageContext
from .backends import (
    Storage,
    StorageStore,
    Watchers,
    EmptyStorage,
    EmptyStorageStore,
    EnvironmentStorage,
    TreeMapStorage,
    TreeMapStorageStore,
    PrefixedStorage,
    Route,
    RoutingStorage,
    RoutingStorageBuilder,
    RoutingStorageStore,
    RoutingStorageStoreBuilder,
)
from .core import connect, mount
from .exceptions import (
    StoreError,
    InvalidNameError,
    InvalidPathError,
    InvalidRangeError,
    InvalidAuditInfoError,
    InvalidEnvironmentNameError,
    ShadowedRouteError,
    EmptyRoutingTableError,
    UnsupportedOperationError,
)

__all__ = [
    # Paths
    "SEPARATOR",
    "StorageName",
    "StoragePath",
    # Values
    "DEFAULT_CONTENT_TYPE",
    "AuditInfo",
    "StorageValue",
    "StorageValueInfo",
    # Context
    "EnvironmentValues",
    "StorageContext",
    # Interfaces
    "Storage",
    "StorageStore",
    "Watchers",
    # Backends
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
    # Configuration
    "connect",
    "mount",
    # Exceptions
    "StoreError",
    "InvalidNameError",
    "InvalidPathError",
    "InvalidRangeError",
    "InvalidAuditInfoError",
    "InvalidEnvironmentNameError",
    "ShadowedRouteError",
    "EmptyRoutingTableError",
    "UnsupportedOperationError",
]

__version__ = "0.1.0"
