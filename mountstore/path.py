"""Hierarchical storage paths.

A StoragePath is an absolute, normalized, slash separated sequence of
StorageName segments such as "/Documents/reports/q1.txt".

Example:
    path = StoragePath.parse("/a/./b/../c")
    print(path)          # /a/c
    print(path.parent)   # /a
    print(path.name)     # c

    path.remove_prefix(StoragePath.parse("/a"))   # /c
"""

from functools import total_ordering
from typing import Iterator, Optional, Union

from .exceptions import InvalidNameError, InvalidPathError

SEPARATOR = "/"


@total_ordering
class StorageName:
    """A single, case-sensitive path segment.

    Names are 1..255 printable characters and never contain the separator.
    The special names "." and ".." are valid names and are resolved by
    StoragePath.append.
    """

    MIN_LENGTH = 1
    MAX_LENGTH = 255

    __slots__ = ("_name",)

    # Assigned after the class body
    ROOT: "StorageName"

    def __init__(self, name: str):
        if name is None:
            raise TypeError("name must not be None")
        if not isinstance(name, str):
            raise TypeError(f"name must be a str, got {type(name).__name__}")
        if not name:
            raise InvalidNameError('Empty "name"')
        if not self.MIN_LENGTH <= len(name) <= self.MAX_LENGTH:
            raise InvalidNameError(
                f'Length {len(name)} of "name" not between '
                f"{self.MIN_LENGTH}..{self.MAX_LENGTH}"
            )
        if SEPARATOR in name:
            raise InvalidNameError(f"Name {name!r} contains {SEPARATOR!r}")
        if not name.isprintable():
            raise InvalidNameError(f"Name {name!r} contains non printable characters")
        self._name = name

    @classmethod
    def _root(cls) -> "StorageName":
        name = object.__new__(cls)
        name._name = SEPARATOR
        return name

    @property
    def value(self) -> str:
        return self._name

    def is_root(self) -> bool:
        return self is StorageName.ROOT

    @property
    def file_extension(self) -> Optional[str]:
        """Text after the last '.', or None if the name has no '.'.

        "xyz.txt" -> "txt", "xyz." -> "", "xyz" -> None
        """
        index = self._name.rfind(".")
        if index == -1:
            return None
        return self._name[index + 1:]

    def __eq__(self, other) -> bool:
        if not isinstance(other, StorageName):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other: "StorageName") -> bool:
        if not isinstance(other, StorageName):
            return NotImplemented
        return self._name < other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"StorageName({self._name!r})"


StorageName.ROOT = StorageName._root()


@total_ordering
class StoragePath:
    """An immutable, absolute and normalized path.

    Instances are created with parse(), or by appending names or paths to an
    existing path. Each path keeps a reference to its parent, so walking
    towards the root never re-parses.

    Equality and ordering compare the full path text, case-sensitively.
    """

    __slots__ = ("_path", "_name", "_parent")

    # Assigned after the class body
    ROOT: "StoragePath"

    def __init__(self, path: str, name: StorageName, parent: Optional["StoragePath"]):
        self._path = path
        self._name = name
        self._parent = parent

    @classmethod
    def parse(cls, text: str) -> "StoragePath":
        """Parse text into a normalized path.

        Args:
            text: Absolute path text, e.g. "/a/b/../c"

        Returns:
            The normalized StoragePath

        Raises:
            InvalidPathError: If the text does not start with "/" or any
                segment is not a valid StorageName (e.g. "//")
        """
        if text is None:
            raise TypeError("path must not be None")
        if not text.startswith(SEPARATOR):
            raise InvalidPathError(
                f"Path {text!r} missing required leading {SEPARATOR!r}"
            )
        if text == SEPARATOR:
            return cls.ROOT

        result = cls.ROOT
        try:
            for component in text[1:].split(SEPARATOR):
                result = result.append(StorageName(component))
        except InvalidNameError as cause:
            raise InvalidPathError(
                f"Failed to parse {text!r}, message: {cause}"
            ) from cause
        return result

    @property
    def value(self) -> str:
        return self._path

    @property
    def name(self) -> StorageName:
        return self._name

    @property
    def parent(self) -> Optional["StoragePath"]:
        """The parent path, or None for ROOT."""
        return self._parent

    def is_root(self) -> bool:
        return self is StoragePath.ROOT

    def names(self) -> Iterator[StorageName]:
        """Yield the names of this path from the root downwards."""
        names = []
        path = self
        while not path.is_root():
            names.append(path._name)
            path = path._parent
        return reversed(names)

    def append(self, other: Union[StorageName, "StoragePath"]) -> "StoragePath":
        """Append a name or every name of another path.

        "." is ignored, ".." moves to the parent (stopping at ROOT) and
        appending ROOT returns this path.
        """
        if other is None:
            raise TypeError("name must not be None")
        if isinstance(other, StoragePath):
            result = self
            for name in other.names():
                result = result.append(name)
            return result

        value = other.value
        if value == SEPARATOR or value == ".":
            return self
        if value == "..":
            return self._parent if self._parent is not None else StoragePath.ROOT

        if self.is_root():
            path = SEPARATOR + value
        else:
            path = self._path + SEPARATOR + value
        return StoragePath(path, other, self)

    def prepend(self, prefix: Union[StorageName, "StoragePath"]) -> "StoragePath":
        """Return prefix with this path appended to it."""
        if prefix is None:
            raise TypeError("prefix must not be None")
        if isinstance(prefix, StorageName):
            prefix = StoragePath.ROOT.append(prefix)
        return prefix.append(self)

    def starts_with(self, prefix: "StoragePath") -> bool:
        """True if prefix is this path or one of its ancestors."""
        if prefix.is_root() or self == prefix:
            return True
        return self._path.startswith(prefix._path + SEPARATOR)

    def remove_prefix(self, prefix: "StoragePath") -> "StoragePath":
        """Return this path relative to prefix.

        Raises:
            InvalidPathError: If prefix is not this path or an ancestor
        """
        if prefix is None:
            raise TypeError("prefix must not be None")
        if prefix.is_root():
            return self
        if self == prefix:
            return StoragePath.ROOT
        if not self._path.startswith(prefix._path + SEPARATOR):
            raise InvalidPathError(
                f"Path {self._path!r} does not start with prefix {prefix._path!r}"
            )
        return StoragePath.parse(self._path[len(prefix._path):])

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, StoragePath):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: "StoragePath") -> bool:
        if not isinstance(other, StoragePath):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"StoragePath({self._path!r})"


StoragePath.ROOT = StoragePath(SEPARATOR, StorageName.ROOT, None)
