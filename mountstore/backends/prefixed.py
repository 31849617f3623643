"""Storage decorator that exposes a storage under a path prefix."""

import logging
from typing import List, Optional

from ..context import StorageContext
from ..path import StoragePath
from ..value import StorageValue, StorageValueInfo
from .base import Storage, check_not_none

logger = logging.getLogger(__name__)


class PrefixedStorage(Storage):
    """Adds a prefix to every path of a wrapped storage.

    Incoming paths must lie under the prefix, which is removed before
    delegating; returned paths get the prefix added back.

    Use wrap() (or Storage.set_prefix) rather than the constructor:

        storage = TreeMapStorage().set_prefix(StoragePath.parse("/docs"))
        storage.save(StorageValue(StoragePath.parse("/docs/a.txt"), "a"), context)
        # the tree itself holds "/a.txt"
    """

    def __init__(self, prefix: StoragePath, storage: Storage):
        self.prefix = prefix
        self.storage = storage

    @classmethod
    def wrap(cls, prefix: StoragePath, storage: Storage) -> Storage:
        """Wrap storage with prefix.

        A ROOT prefix returns storage unchanged. Wrapping a PrefixedStorage
        combines both prefixes around the innermost storage.
        """
        check_not_none(prefix, "prefix")
        check_not_none(storage, "storage")

        if prefix.is_root():
            return storage
        if isinstance(storage, PrefixedStorage):
            logger.debug("Flattening prefix %s onto %s", prefix, storage.prefix)
            return cls(prefix.append(storage.prefix), storage.storage)
        return cls(prefix, storage)

    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        value = self.storage.load(path.remove_prefix(self.prefix), context)
        return value.prepend_path(self.prefix) if value is not None else None

    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        return self.storage.save(
            value.remove_prefix_path(self.prefix),
            context,
        ).prepend_path(self.prefix)

    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        self.storage.delete(path.remove_prefix(self.prefix), context)

    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        return [
            info.prepend_path(self.prefix)
            for info in self.storage.list(
                parent.remove_prefix(self.prefix),
                offset,
                count,
                context,
            )
        ]

    def __repr__(self) -> str:
        return f"PrefixedStorage({self.prefix}, {self.storage!r})"
