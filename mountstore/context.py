"""Context passed to storage operations.

A StorageContext bundles the collaborators a store needs but does not own:
the current user and clock used to stamp audit info, and a bag of named
environment values.

Example:
    context = StorageContext(user="user@example.com")
    context.environment.set("locale", "en-AU")
    context.set_current_working_directory(StoragePath.parse("/home/user"))
"""

import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from .exceptions import InvalidEnvironmentNameError
from .path import StoragePath
from .value import AuditInfo

CURRENT_WORKING_DIRECTORY = "currentWorkingDirectory"
HOME_DIRECTORY = "homeDirectory"


class EnvironmentValues:
    """A mutable bag of named values.

    Names start with a letter followed by letters, digits, '.', '-' or '_'.
    """

    NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9._-]*")
    MAX_NAME_LENGTH = 255

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    @classmethod
    def check_name(cls, name: str) -> str:
        if name is None:
            raise TypeError("name must not be None")
        if len(name) > cls.MAX_NAME_LENGTH or not cls.NAME_PATTERN.fullmatch(name):
            raise InvalidEnvironmentNameError(name)
        return name

    def get(self, name: str) -> Optional[Any]:
        return self._values.get(self.check_name(name))

    def set(self, name: str, value: Any) -> None:
        if value is None:
            raise TypeError("value must not be None")
        self._values[self.check_name(name)] = value

    def remove(self, name: str) -> None:
        self._values.pop(self.check_name(name), None)

    def set_or_remove(self, name: str, value: Optional[Any]) -> None:
        """Set the value, or remove the name when value is None."""
        if value is None:
            self.remove(name)
        else:
            self.set(name, value)

    def names(self) -> List[str]:
        """All names, sorted."""
        return sorted(self._values)

    def copy(self) -> "EnvironmentValues":
        return EnvironmentValues(self._values)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EnvironmentValues):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"EnvironmentValues({self._values!r})"


class StorageContext:
    """User, clock and environment values for storage operations."""

    def __init__(
        self,
        user: str,
        environment: Optional[EnvironmentValues] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if user is None:
            raise TypeError("user must not be None")
        self.user = user
        self.environment = environment if environment is not None else EnvironmentValues()
        self.clock = clock

    # Audit

    def created_audit_info(self) -> AuditInfo:
        """Fresh audit info stamped with the current user and time."""
        return AuditInfo.create(self.user, self.clock())

    def refresh_modified_audit_info(self, audit_info: AuditInfo) -> AuditInfo:
        """Stamp a new modified user and time, keeping the created portion."""
        if audit_info is None:
            raise TypeError("audit_info must not be None")
        return audit_info.refresh(self.user, self.clock())

    # Paths

    def parse_storage_path(self, text: str) -> StoragePath:
        return StoragePath.parse(text)

    @property
    def current_working_directory(self) -> Optional[StoragePath]:
        return self.environment.get(CURRENT_WORKING_DIRECTORY)

    def set_current_working_directory(self, path: Optional[StoragePath]) -> None:
        self.environment.set_or_remove(CURRENT_WORKING_DIRECTORY, path)

    @property
    def home_directory(self) -> Optional[StoragePath]:
        return self.environment.get(HOME_DIRECTORY)

    def set_home_directory(self, path: Optional[StoragePath]) -> None:
        self.environment.set_or_remove(HOME_DIRECTORY, path)

    # Environment

    def clone_environment(self) -> "StorageContext":
        """A context sharing user and clock with a copy of the environment."""
        return StorageContext(self.user, self.environment.copy(), self.clock)

    def __repr__(self) -> str:
        return f"StorageContext(user={self.user!r}, environment={self.environment!r})"
