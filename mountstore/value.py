"""Immutable values and metadata stored against a StoragePath."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from .exceptions import InvalidAuditInfoError
from .path import StoragePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _require(value, name: str):
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


@dataclass(frozen=True)
class AuditInfo:
    """Who created and last modified an entry, and when.

    Raises:
        InvalidAuditInfoError: If modified_at is before created_at
    """

    created_by: str
    created_at: datetime
    modified_by: str
    modified_at: datetime

    def __post_init__(self):
        _require(self.created_by, "created_by")
        _require(self.created_at, "created_at")
        _require(self.modified_by, "modified_by")
        _require(self.modified_at, "modified_at")
        if self.modified_at < self.created_at:
            raise InvalidAuditInfoError(
                f"Modified {self.modified_at.isoformat()} "
                f"before created {self.created_at.isoformat()}"
            )

    @classmethod
    def create(cls, user: str, now: datetime) -> "AuditInfo":
        """Audit info for a new entry, created and modified by the same user."""
        return cls(
            created_by=user,
            created_at=now,
            modified_by=user,
            modified_at=now,
        )

    def refresh(self, user: str, now: datetime) -> "AuditInfo":
        """Return a copy with a new modified stamp, keeping the created stamp."""
        return replace(self, modified_by=user, modified_at=now)


@dataclass(frozen=True)
class StorageValue:
    """An optional payload stored at a path.

    A value of None means no payload, which is how directories are stored.

    Example:
        value = StorageValue(StoragePath.parse("/notes/todo.txt"), "milk", "text/plain")
        moved = value.set_path(StoragePath.parse("/archive/todo.txt"))
    """

    path: StoragePath
    value: Optional[Any] = None
    content_type: str = DEFAULT_CONTENT_TYPE

    def __post_init__(self):
        if not isinstance(_require(self.path, "path"), StoragePath):
            raise TypeError(f"path must be a StoragePath, got {type(self.path).__name__}")
        if not _require(self.content_type, "content_type"):
            raise ValueError("content_type must not be empty")

    @classmethod
    def empty(cls, path: StoragePath) -> "StorageValue":
        """A value without payload, with the default content type."""
        if path is StoragePath.ROOT:
            return ROOT_VALUE
        return cls(path)

    def set_path(self, path: StoragePath) -> "StorageValue":
        _require(path, "path")
        return self if self.path == path else replace(self, path=path)

    def set_value(self, value: Optional[Any]) -> "StorageValue":
        return self if self.value == value else replace(self, value=value)

    def set_content_type(self, content_type: str) -> "StorageValue":
        _require(content_type, "content_type")
        if self.content_type == content_type:
            return self
        return replace(self, content_type=content_type)

    def prepend_path(self, prefix: StoragePath) -> "StorageValue":
        return self.set_path(self.path.prepend(prefix))

    def remove_prefix_path(self, prefix: StoragePath) -> "StorageValue":
        return self.set_path(self.path.remove_prefix(prefix))

    def __str__(self) -> str:
        return f"{self.path}={self.value!r}"


ROOT_VALUE = StorageValue(StoragePath.ROOT)


@dataclass(frozen=True)
class StorageValueInfo:
    """Metadata for a stored entry: its path and audit info."""

    path: StoragePath
    audit_info: AuditInfo

    def __post_init__(self):
        _require(self.path, "path")
        _require(self.audit_info, "audit_info")

    def set_path(self, path: StoragePath) -> "StorageValueInfo":
        _require(path, "path")
        return self if self.path == path else replace(self, path=path)

    def set_audit_info(self, audit_info: AuditInfo) -> "StorageValueInfo":
        _require(audit_info, "audit_info")
        return self if self.audit_info == audit_info else replace(self, audit_info=audit_info)

    def prepend_path(self, prefix: StoragePath) -> "StorageValueInfo":
        return self.set_path(self.path.prepend(prefix))

    def __str__(self) -> str:
        return f"{self.path} {self.audit_info}"
