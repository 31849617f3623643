"""Stores that hold nothing and refuse writes."""

from typing import Callable, List, Optional

from ..context import StorageContext
from ..exceptions import UnsupportedOperationError
from ..path import StoragePath
from ..value import StorageValue, StorageValueInfo
from .base import (
    Remover,
    Storage,
    StorageStore,
    check_not_none,
    check_offset_and_count,
    no_op_remover,
)


class EmptyStorage(Storage):
    """Read-only Storage without entries."""

    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        return None

    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        raise UnsupportedOperationError(f"Storing {value} is not supported")

    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        raise UnsupportedOperationError(f"Deleting {path} is not supported")

    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        return []

    def __repr__(self) -> str:
        return "EmptyStorage()"


class EmptyStorageStore(StorageStore):
    """Read-only StorageStore without entries."""

    def load(self, path: StoragePath) -> Optional[StorageValue]:
        check_not_none(path, "path")
        return None

    def save(self, value: StorageValue) -> StorageValue:
        check_not_none(value, "value")
        raise UnsupportedOperationError(f"Storing {value} is not supported")

    def delete(self, path: StoragePath) -> None:
        check_not_none(path, "path")
        raise UnsupportedOperationError(f"Deleting {path} is not supported")

    def storage_value_infos(
        self, parent: StoragePath, offset: int, count: int
    ) -> List[StorageValueInfo]:
        check_not_none(parent, "parent")
        check_offset_and_count(offset, count)
        return []

    def count(self) -> int:
        return 0

    def ids(self, offset: int, count: int) -> List[StoragePath]:
        check_offset_and_count(offset, count)
        return []

    def values(self, offset: int, count: int) -> List[StorageValue]:
        check_offset_and_count(offset, count)
        return []

    def between(self, start: StoragePath, end: StoragePath) -> List[StorageValue]:
        check_not_none(start, "start")
        check_not_none(end, "end")
        return []

    def all(self) -> List[StorageValue]:
        return []

    def add_save_watcher(self, watcher: Callable[[StorageValue], None]) -> Remover:
        check_not_none(watcher, "watcher")
        return no_op_remover

    def add_delete_watcher(self, watcher: Callable[[StoragePath], None]) -> Remover:
        check_not_none(watcher, "watcher")
        return no_op_remover

    def __repr__(self) -> str:
        return "EmptyStorageStore()"
