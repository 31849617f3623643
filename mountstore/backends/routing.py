"""Routing storage: a mount table of path prefixes to stores.

Example:
    storage = (
        RoutingStorageBuilder()
        .starts_with(StoragePath.parse("/docs"), TreeMapStorage())
        .starts_with(StoragePath.parse("/env"), EnvironmentStorage())
        .build()
    )

    storage.save(StorageValue(StoragePath.parse("/docs/a.txt"), "a"), context)
    # the /docs tree holds "/a.txt"

Mounts are matched in the order they were added, first match wins. A mount
whose prefix equals or lies under an earlier prefix would never be reached
and is rejected with ShadowedRouteError.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from ..context import StorageContext
from ..exceptions import EmptyRoutingTableError, ShadowedRouteError, UnsupportedOperationError
from ..path import StoragePath
from ..value import StorageValue, StorageValueInfo
from .base import (
    Remover,
    Storage,
    StorageStore,
    check_not_none,
    check_offset_and_count,
    combine_removers,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Route(Generic[S]):
    """A mount: a path prefix and the store mounted there."""

    __slots__ = ("prefix", "store")

    def __init__(self, prefix: StoragePath, store: S):
        self.prefix = check_not_none(prefix, "prefix")
        self.store = check_not_none(store, "store")

    def is_match(self, path: StoragePath) -> bool:
        """True if path is the prefix or lies under it."""
        return path.starts_with(self.prefix)

    def remove(self, path: StoragePath) -> StoragePath:
        """Translate an absolute path into the mounted store's path."""
        if self.prefix.is_root():
            return path
        if self.prefix == path:
            return StoragePath.ROOT
        return StoragePath.parse(path.value[len(self.prefix.value):])

    def add(self, path: StoragePath) -> StoragePath:
        """Translate a mounted store's path back into an absolute path."""
        return self.prefix.append(path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self.prefix == other.prefix and self.store is other.store

    def __hash__(self) -> int:
        return hash((self.prefix, id(self.store)))

    def __repr__(self) -> str:
        return f'"{self.prefix}*" {self.store!r}'


def _first_match(routes: List[Route[S]], path: StoragePath) -> Optional[Route[S]]:
    for route in routes:
        if route.is_match(path):
            return route
    return None


class _RoutingBuilder(Generic[S]):
    def __init__(self):
        self._routes: List[Route[S]] = []

    def starts_with(self, prefix: StoragePath, store: S) -> "_RoutingBuilder[S]":
        """Mount store at prefix.

        Raises:
            ShadowedRouteError: If an earlier mount already matches prefix
        """
        new_route = Route(prefix, store)
        for route in self._routes:
            if route.is_match(prefix):
                raise ShadowedRouteError(prefix, route.prefix)
        logger.debug("Mounted %r", new_route)
        self._routes.append(new_route)
        return self

    def _copy_routes(self) -> List[Route[S]]:
        if not self._routes:
            raise EmptyRoutingTableError("Empty builder")
        return list(self._routes)

    def __repr__(self) -> str:
        return repr(self._routes)


class RoutingStorageBuilder(_RoutingBuilder[Storage]):
    """Builds a RoutingStorage from (prefix, Storage) mounts."""

    def build(self) -> "RoutingStorage":
        return RoutingStorage(self._copy_routes())


class RoutingStorageStoreBuilder(_RoutingBuilder[StorageStore]):
    """Builds a RoutingStorageStore from (prefix, StorageStore) mounts."""

    def build(self) -> "RoutingStorageStore":
        return RoutingStorageStore(self._copy_routes())


class RoutingStorage(Storage):
    """Dispatches each operation to the first mount matching its path.

    Reads outside every mount find nothing; writes outside every mount raise
    UnsupportedOperationError.
    """

    def __init__(self, routes: List[Route[Storage]]):
        self._routes = tuple(routes)

    @property
    def routes(self) -> List[Route[Storage]]:
        return list(self._routes)

    def _route(self, path: StoragePath) -> Optional[Route[Storage]]:
        route = _first_match(self._routes, path)
        if route is None:
            logger.debug("No mount for %s", path)
        return route

    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        route = self._route(path)
        if route is None:
            return None
        value = route.store.load(route.remove(path), context)
        if value is None:
            return None
        return value.set_path(route.add(value.path))

    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        route = self._route(value.path)
        if route is None:
            raise UnsupportedOperationError(f"Storing {value} is not supported")
        saved = route.store.save(value.set_path(route.remove(value.path)), context)
        return saved.set_path(route.add(saved.path))

    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        route = self._route(path)
        if route is None:
            raise UnsupportedOperationError(f"Deleting {path} is not supported")
        route.store.delete(route.remove(path), context)

    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        route = self._route(parent)
        if route is None:
            return []
        return [
            info.set_path(route.add(info.path))
            for info in route.store.list(route.remove(parent), offset, count, context)
        ]

    def __repr__(self) -> str:
        return f"RoutingStorage({list(self._routes)!r})"


class RoutingStorageStore(StorageStore):
    """StorageStore flavour of RoutingStorage.

    Flat enumeration (ids, values) walks the mounts in order, treating their
    entries as one concatenated sequence. Watchers are registered with every
    mounted store.
    """

    def __init__(self, routes: List[Route[StorageStore]]):
        self._routes = tuple(routes)

    @property
    def routes(self) -> List[Route[StorageStore]]:
        return list(self._routes)

    def _route(self, path: StoragePath) -> Optional[Route[StorageStore]]:
        route = _first_match(self._routes, path)
        if route is None:
            logger.debug("No mount for %s", path)
        return route

    def load(self, path: StoragePath) -> Optional[StorageValue]:
        check_not_none(path, "path")
        route = self._route(path)
        if route is None:
            return None
        value = route.store.load(route.remove(path))
        if value is None:
            return None
        return value.set_path(route.add(value.path))

    def save(self, value: StorageValue) -> StorageValue:
        check_not_none(value, "value")
        route = self._route(value.path)
        if route is None:
            raise UnsupportedOperationError(f"Storing {value} is not supported")
        saved = route.store.save(value.set_path(route.remove(value.path)))
        return saved.set_path(route.add(saved.path))

    def delete(self, path: StoragePath) -> None:
        check_not_none(path, "path")
        route = self._route(path)
        if route is None:
            raise UnsupportedOperationError(f"Deleting {path} is not supported")
        route.store.delete(route.remove(path))

    def storage_value_infos(
        self, parent: StoragePath, offset: int, count: int
    ) -> List[StorageValueInfo]:
        check_not_none(parent, "parent")
        check_offset_and_count(offset, count)
        route = self._route(parent)
        if route is None:
            return []
        return [
            info.set_path(route.add(info.path))
            for info in route.store.storage_value_infos(route.remove(parent), offset, count)
        ]

    def count(self) -> int:
        return sum(route.store.count() for route in self._routes)

    def ids(self, offset: int, count: int) -> List[StoragePath]:
        check_offset_and_count(offset, count)
        return self._window(
            offset,
            count,
            lambda route, skip, remaining: [
                route.add(path) for path in route.store.ids(skip, remaining)
            ],
        )

    def values(self, offset: int, count: int) -> List[StorageValue]:
        check_offset_and_count(offset, count)
        return self._window(
            offset,
            count,
            lambda route, skip, remaining: [
                value.set_path(route.add(value.path))
                for value in route.store.values(skip, remaining)
            ],
        )

    def _window(self, offset: int, count: int, fetch: Callable) -> list:
        """Apply offset and count across all mounts, in mount order."""
        results = []
        skip = offset
        for route in self._routes:
            remaining = count - len(results)
            if remaining <= 0:
                break
            store_count = route.store.count()
            if skip >= store_count:
                skip -= store_count
                continue
            results.extend(fetch(route, skip, remaining))
            skip = 0
        return results

    def between(self, start: StoragePath, end: StoragePath) -> List[StorageValue]:
        check_not_none(start, "start")
        check_not_none(end, "end")
        return [value for value in self.all() if start <= value.path <= end]

    def all(self) -> List[StorageValue]:
        return [
            value.set_path(route.add(value.path))
            for route in self._routes
            for value in route.store.all()
        ]

    def add_save_watcher(self, watcher: Callable[[StorageValue], None]) -> Remover:
        check_not_none(watcher, "watcher")
        return self._add_to_every_route(
            lambda route: route.store.add_save_watcher(_absolute_value_watcher(route, watcher))
        )

    def add_delete_watcher(self, watcher: Callable[[StoragePath], None]) -> Remover:
        check_not_none(watcher, "watcher")
        return self._add_to_every_route(
            lambda route: route.store.add_delete_watcher(_absolute_path_watcher(route, watcher))
        )

    def _add_to_every_route(self, add: Callable[[Route[StorageStore]], Remover]) -> Remover:
        """Register with every mount, or with none if any registration fails."""
        removers = []
        try:
            for route in self._routes:
                removers.append(add(route))
        except Exception:
            combine_removers(removers)()
            raise
        return combine_removers(removers)

    def __repr__(self) -> str:
        return f"RoutingStorageStore({list(self._routes)!r})"


def _absolute_value_watcher(route: Route, watcher: Callable[[StorageValue], None]):
    def watch(value: StorageValue) -> None:
        watcher(value.set_path(route.add(value.path)))

    return watch


def _absolute_path_watcher(route: Route, watcher: Callable[[StoragePath], None]):
    def watch(path: StoragePath) -> None:
        watcher(route.add(path))

    return watch
