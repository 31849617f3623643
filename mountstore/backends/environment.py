"""Storage backed by the environment values of the StorageContext.

The leaf name of a path is the environment value name, so "/locale" and
"/any/dir/locale" both address the "locale" value.
"""

from typing import List, Optional

from ..context import StorageContext
from ..exceptions import InvalidEnvironmentNameError
from ..path import SEPARATOR, StorageName, StoragePath
from ..value import StorageValue, StorageValueInfo
from .base import Storage


class EnvironmentStorage(Storage):
    """Bridges StorageContext.environment to the Storage interface.

    Invalid names load as missing and delete as a no-op. Saving to an
    invalid name raises InvalidEnvironmentNameError. Saving a value of None
    removes the name.
    """

    def _load(self, path: StoragePath, context: StorageContext) -> Optional[StorageValue]:
        try:
            value = context.environment.get(path.name.value)
        except InvalidEnvironmentNameError:
            return None
        if value is None:
            return None
        return StorageValue(path, value)

    def _save(self, value: StorageValue, context: StorageContext) -> StorageValue:
        path = value.path
        name = path.name.value
        context.environment.set_or_remove(name, value.value)
        return StorageValue(path, context.environment.get(name))

    def _delete(self, path: StoragePath, context: StorageContext) -> None:
        try:
            context.environment.remove(path.name.value)
        except InvalidEnvironmentNameError:
            pass

    def _list(
        self,
        parent: StoragePath,
        offset: int,
        count: int,
        context: StorageContext,
    ) -> List[StorageValueInfo]:
        prefix = parent.value
        if prefix.startswith(SEPARATOR):
            prefix = prefix[len(SEPARATOR):]

        audit_info = context.created_audit_info()
        names = [n for n in context.environment.names() if n.startswith(prefix)]
        return [
            StorageValueInfo(StoragePath.ROOT.append(StorageName(name)), audit_info)
            for name in names[offset:offset + count]
        ]

    def __repr__(self) -> str:
        return "EnvironmentStorage()"
