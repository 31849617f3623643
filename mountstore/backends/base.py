"""Abstract base classes for storage backends.

Two flavours of store exist:

    Storage       every operation takes the StorageContext to use
    StorageStore  the context is bound once, at construction; adds flat
                  enumeration (ids/values/between) and save/delete watchers
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from ..context import StorageContext
from ..exceptions import InvalidRangeError
from ..path import StoragePath
from ..value import StorageValue, StorageValueInfo

T = TypeVar("T")

Remover = Callable[[], None]


def check_not_none(value, name: str):
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def check_offset_and_count(offset: int, count: int) -> None:
    """Raise InvalidRangeError if offset or count is negative."""
    if offset < 0 or count < 0:
        raise InvalidRangeError(offset, count)


class Storage(ABC):
    """A path-addressed store whose operations take a StorageContext.

    The public methods validate their arguments and then delegate to the
    matching underscore method, which subclasses implement.
    """

    def load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        """Load the value at exactly path.

        Returns:
            The StorageValue, or None if nothing is stored at path
        """
        check_not_none(path, "path")
        check_not_none(context, "context")
        return self._load(path, context)

    def save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        """Save value at value.path.

        Returns:
            The value as now stored
        """
        check_not_none(value, "value")
        check_not_none(context, "context")
        return self._save(value, context)

    def delete(self, path: StoragePath, context: StorageContext) -> None:
        """Delete the entry at exactly path."""
        check_not_none(path, "path")
        check_not_none(context, "context")
        self._delete(path, context)

    def list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        """List the direct children of parent.

        Args:
            parent: Directory path
            offset: Number of children to skip
            count: Maximum number of children to return

        Returns:
            Metadata of the children, in path order
        """
        check_not_none(parent, "parent")
        check_offset_and_count(offset, count)
        check_not_none(context, "context")
        return self._list(parent, offset, count, context)

    def set_prefix(self, prefix: StoragePath) -> "Storage":
        """Return this storage visible under prefix."""
        from .prefixed import PrefixedStorage

        return PrefixedStorage.wrap(prefix, self)

    @abstractmethod
    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        pass

    @abstractmethod
    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        pass

    @abstractmethod
    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        pass

    @abstractmethod
    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        pass


class StorageStore(ABC):
    """A path-addressed store with its context bound at construction."""

    @abstractmethod
    def load(self, path: StoragePath) -> Optional[StorageValue]:
        """Load the value at exactly path, or None."""
        pass

    @abstractmethod
    def save(self, value: StorageValue) -> StorageValue:
        """Save value and return it as stored."""
        pass

    @abstractmethod
    def delete(self, path: StoragePath) -> None:
        """Delete the entry at exactly path."""
        pass

    @abstractmethod
    def storage_value_infos(
        self, parent: StoragePath, offset: int, count: int
    ) -> List[StorageValueInfo]:
        """Metadata of the direct children of parent, in path order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored entries."""
        pass

    @abstractmethod
    def ids(self, offset: int, count: int) -> List[StoragePath]:
        """A window of stored paths, in store order."""
        pass

    @abstractmethod
    def values(self, offset: int, count: int) -> List[StorageValue]:
        """A window of stored values, in store order."""
        pass

    @abstractmethod
    def between(self, start: StoragePath, end: StoragePath) -> List[StorageValue]:
        """Values whose path lies between start and end, both inclusive."""
        pass

    @abstractmethod
    def all(self) -> List[StorageValue]:
        """Every stored value, in store order."""
        pass

    @abstractmethod
    def add_save_watcher(self, watcher: Callable[[StorageValue], None]) -> Remover:
        """Call watcher with each saved value.

        Returns:
            A callable that removes the watcher
        """
        pass

    @abstractmethod
    def add_delete_watcher(self, watcher: Callable[[StoragePath], None]) -> Remover:
        """Call watcher with each deleted path.

        Returns:
            A callable that removes the watcher
        """
        pass


class Watchers(Generic[T]):
    """Callbacks notified synchronously, in registration order.

    Exceptions raised by a watcher propagate to the caller of fire().
    """

    def __init__(self):
        self._watchers: List[Callable[[T], None]] = []

    def add(self, watcher: Callable[[T], None]) -> Remover:
        check_not_none(watcher, "watcher")
        # Entries compare by identity, one per registration
        entry = _WatcherEntry(watcher)
        self._watchers.append(entry)

        def remove() -> None:
            if entry in self._watchers:
                self._watchers.remove(entry)

        return remove

    def fire(self, event: T) -> None:
        for watcher in tuple(self._watchers):
            watcher(event)

    def __len__(self) -> int:
        return len(self._watchers)


class _WatcherEntry:
    __slots__ = ("watcher",)

    def __init__(self, watcher):
        self.watcher = watcher

    def __call__(self, event):
        self.watcher(event)


def combine_removers(removers: Iterable[Remover]) -> Remover:
    """A single remover that runs every given remover."""
    removers = list(removers)

    def remove() -> None:
        for remover in removers:
            remover()

    return remove


def no_op_remover() -> None:
    pass
