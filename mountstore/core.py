"""Building storages from URLs and mount tables."""

import logging
from typing import Mapping, Union
from urllib.parse import urlparse

from .backends.base import Storage
from .backends.empty import EmptyStorage
from .backends.environment import EnvironmentStorage
from .backends.memory import TreeMapStorage
from .backends.routing import RoutingStorage, RoutingStorageBuilder
from .path import StoragePath

logger = logging.getLogger(__name__)


def connect(url: str) -> Storage:
    """Create a Storage from a URL.

    Supported URL schemes:
        - memory://   In-memory hierarchical storage
        - env://      The environment values of the calling context
        - empty://    Read-only storage without entries

    A URL path exposes the storage under that prefix, so
    "memory:///docs" accepts "/docs/a.txt" and stores "/a.txt".

    Args:
        url: Connection URL

    Returns:
        The Storage

    Example:
        storage = connect("memory://")
        docs = connect("memory:///docs")
    """
    parsed = urlparse(url)
    scheme = parsed.scheme

    if scheme == "memory":
        storage = TreeMapStorage()
    elif scheme == "env":
        storage = EnvironmentStorage()
    elif scheme == "empty":
        storage = EmptyStorage()
    else:
        raise ValueError(f"Unknown storage scheme: {scheme}")

    if parsed.netloc:
        raise ValueError(
            f"Unexpected host {parsed.netloc!r} in storage URL {url!r}, use scheme:///prefix"
        )

    if parsed.path and parsed.path != "/":
        storage = storage.set_prefix(StoragePath.parse(parsed.path))

    logger.debug("Connected %s to %r", url, storage)
    return storage


def mount(mounts: Mapping[str, Union[str, Storage]]) -> RoutingStorage:
    """Build a RoutingStorage from a mapping of prefix to storage.

    Mounts are added in mapping order. A value may be a Storage or a URL
    accepted by connect().

    Example:
        storage = mount({
            "/docs": "memory://",
            "/env": "env://",
        })

    Raises:
        ShadowedRouteError: If a prefix lies under an earlier prefix
        EmptyRoutingTableError: If mounts is empty
    """
    builder = RoutingStorageBuilder()
    for prefix, storage in mounts.items():
        if isinstance(storage, str):
            storage = connect(storage)
        builder.starts_with(StoragePath.parse(prefix), storage)
    return builder.build()
