"""Exceptions for the mountstore package."""


class StoreError(Exception):
    """Base exception for all store errors."""

    pass


class InvalidNameError(StoreError, ValueError):
    """A path segment failed validation."""

    pass


class InvalidPathError(StoreError, ValueError):
    """Malformed path text, or a path outside of a required prefix."""

    pass


class InvalidRangeError(StoreError, ValueError):
    """Negative offset or count passed to a paging operation."""

    def __init__(self, offset: int, count: int):
        self.offset = offset
        self.count = count
        super().__init__(
            f"Invalid offset {offset} or count {count}, both must be >= 0"
        )


class InvalidAuditInfoError(StoreError, ValueError):
    """Audit info whose modified timestamp precedes its created timestamp."""

    pass


class InvalidEnvironmentNameError(StoreError, ValueError):
    """Name is not usable as an environment value name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid environment value name: {name!r}")


class ShadowedRouteError(StoreError, ValueError):
    """A new mount would be hidden by an existing mount."""

    def __init__(self, prefix, shadowed_by):
        self.prefix = prefix
        self.shadowed_by = shadowed_by
        super().__init__(
            f"Invalid path \"{prefix}*\" would be shadowed by \"{shadowed_by}*\""
        )


class EmptyRoutingTableError(StoreError):
    """Routing table built without any mounts."""

    pass


class UnsupportedOperationError(StoreError, NotImplementedError):
    """Operation not supported by this store or for this path."""

    pass
