"""In-memory hierarchical storage.

Entries are kept in a dict keyed by StoragePath and read back in path order.
Saving a path creates any missing ancestor directories, so listings always
find the intermediate levels.

Example:
    storage = TreeMapStorage()
    storage.save(StorageValue(StoragePath.parse("/base/dir1/file.txt"), "hi"), context)

    storage.list(StoragePath.parse("/base"), 0, 10, context)
    # [StorageValueInfo(path=/base/dir1, ...)]
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterator, List, Optional

from ..context import StorageContext
from ..path import StoragePath
from ..value import StorageValue, StorageValueInfo
from .base import (
    Remover,
    Storage,
    StorageStore,
    Watchers,
    check_not_none,
    check_offset_and_count,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeEntry:
    """A stored value together with its metadata."""

    info: StorageValueInfo
    value: StorageValue


class _PathTree:
    """Path ordered entries with directory semantics.

    Not thread safe; callers serialize writes.
    """

    def __init__(self, on_save: Optional[Callable[[StorageValue], None]] = None):
        self._entries: Dict[StoragePath, TreeEntry] = {}
        self._on_save = on_save

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, path: StoragePath) -> Optional[TreeEntry]:
        return self._entries.get(path)

    def entries(self) -> Iterator[TreeEntry]:
        for path in sorted(self._entries):
            yield self._entries[path]

    def paths(self) -> List[StoragePath]:
        return sorted(self._entries)

    def _put(self, entry: TreeEntry) -> TreeEntry:
        self._entries[entry.info.path] = entry
        if self._on_save is not None:
            self._on_save(entry.value)
        return entry

    def save_root_if_necessary(self, context: StorageContext) -> None:
        if not self._entries:
            self._put(_directory(StoragePath.ROOT, context))

    def save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        path = value.path
        existing = self._entries.get(path)

        if existing is not None:
            info = existing.info.set_audit_info(
                context.refresh_modified_audit_info(existing.info.audit_info)
            )
            return self._put(replace(existing, info=info, value=value)).value

        entry = TreeEntry(
            info=StorageValueInfo(path, context.created_audit_info()),
            value=value,
        )

        # Stop at the first existing ancestor, its own ancestors already exist
        parent = path.parent
        while parent is not None and not parent.is_root():
            if parent in self._entries:
                break
            logger.debug("Creating directory %s for %s", parent, path)
            self._put(_directory(parent, context))
            parent = parent.parent

        return self._put(entry).value

    def delete(self, path: StoragePath) -> bool:
        return self._entries.pop(path, None) is not None

    def children(self, parent: StoragePath, offset: int, count: int) -> List[StorageValueInfo]:
        infos = []
        skipped = 0
        for entry in self.entries():
            if len(infos) >= count:
                break
            if entry.info.path.parent != parent:
                continue
            if skipped < offset:
                skipped += 1
                continue
            infos.append(entry.info)
        return infos

    def __repr__(self) -> str:
        return repr([str(entry.value) for entry in self.entries()])


def _directory(path: StoragePath, context: StorageContext) -> TreeEntry:
    return TreeEntry(
        info=StorageValueInfo(path, context.created_audit_info()),
        value=StorageValue.empty(path),
    )


class TreeMapStorage(Storage):
    """Hierarchical in-memory Storage.

    The root directory entry is created on the first save or list.
    """

    def __init__(self):
        self._tree = _PathTree()

    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        entry = self._tree.get(path)
        return entry.value if entry is not None else None

    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        self._tree.save_root_if_necessary(context)
        return self._tree.save(value, context)

    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        self._tree.delete(path)

    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        self._tree.save_root_if_necessary(context)
        return self._tree.children(parent, offset, count)

    def __repr__(self) -> str:
        return f"TreeMapStorage({self._tree!r})"


class TreeMapStorageStore(StorageStore):
    """Hierarchical in-memory StorageStore bound to one StorageContext.

    The root directory entry exists from construction. Save watchers see
    every written entry, including created ancestor directories.
    """

    def __init__(self, context: StorageContext):
        self._context = check_not_none(context, "context")
        self._save_watchers: Watchers[StorageValue] = Watchers()
        self._delete_watchers: Watchers[StoragePath] = Watchers()
        self._tree = _PathTree(on_save=self._save_watchers.fire)
        self._tree.save_root_if_necessary(context)

    def load(self, path: StoragePath) -> Optional[StorageValue]:
        check_not_none(path, "path")
        entry = self._tree.get(path)
        return entry.value if entry is not None else None

    def save(self, value: StorageValue) -> StorageValue:
        check_not_none(value, "value")
        return self._tree.save(value, self._context)

    def delete(self, path: StoragePath) -> None:
        check_not_none(path, "path")
        if self._tree.delete(path):
            self._delete_watchers.fire(path)

    def storage_value_infos(
        self, parent: StoragePath, offset: int, count: int
    ) -> List[StorageValueInfo]:
        check_not_none(parent, "parent")
        check_offset_and_count(offset, count)
        return self._tree.children(parent, offset, count)

    def count(self) -> int:
        return len(self._tree)

    def ids(self, offset: int, count: int) -> List[StoragePath]:
        check_offset_and_count(offset, count)
        return self._tree.paths()[offset:offset + count]

    def values(self, offset: int, count: int) -> List[StorageValue]:
        check_offset_and_count(offset, count)
        return [self._tree.get(path).value for path in self.ids(offset, count)]

    def between(self, start: StoragePath, end: StoragePath) -> List[StorageValue]:
        check_not_none(start, "start")
        check_not_none(end, "end")
        return [
            entry.value
            for entry in self._tree.entries()
            if start <= entry.info.path <= end
        ]

    def all(self) -> List[StorageValue]:
        return [entry.value for entry in self._tree.entries()]

    def add_save_watcher(self, watcher: Callable[[StorageValue], None]) -> Remover:
        return self._save_watchers.add(watcher)

    def add_delete_watcher(self, watcher: Callable[[StoragePath], None]) -> Remover:
        return self._delete_watchers.add(watcher)

    def __repr__(self) -> str:
        return f"TreeMapStorageStore({self._tree!r})"
