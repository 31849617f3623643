"""Tests for connect() and mount()."""

import pytest

from mountstore import (
    EmptyRoutingTableError,
    EmptyStorage,
    EnvironmentStorage,
    PrefixedStorage,
    RoutingStorage,
    ShadowedRouteError,
    StoragePath,
    StorageValue,
    TreeMapStorage,
    connect,
    mount,
)

P = StoragePath.parse


class TestConnect:
    """Tests for connect()."""

    def test_memory(self):
        """memory:// is a tree storage."""
        assert isinstance(connect("memory://"), TreeMapStorage)

    def test_env(self):
        """env:// is the environment storage."""
        assert isinstance(connect("env://"), EnvironmentStorage)

    def test_empty(self):
        """empty:// is the empty storage."""
        assert isinstance(connect("empty://"), EmptyStorage)

    def test_path_prefix(self, context):
        """A URL path prefixes the storage."""
        storage = connect("memory:///docs")
        assert isinstance(storage, PrefixedStorage)
        assert storage.prefix == P("/docs")

        storage.save(StorageValue(P("/docs/a"), 1), context)
        assert storage.load(P("/docs/a"), context).value == 1

    def test_host_rejected(self):
        """A host part is a mistyped prefix and is rejected."""
        with pytest.raises(ValueError) as raised:
            connect("memory://docs/a")
        assert "docs" in str(raised.value)
        with pytest.raises(ValueError):
            connect("memory://docs")

    def test_host_rejected_by_mount(self):
        """mount() passes URL errors through."""
        with pytest.raises(ValueError):
            mount({"/docs": "memory://docs"})

    def test_unknown_scheme(self):
        """Unknown schemes are rejected."""
        with pytest.raises(ValueError):
            connect("ftp://example.com")


class TestMount:
    """Tests for mount()."""

    def test_mount(self, context):
        """URLs and storages can be mixed."""
        docs = TreeMapStorage()
        storage = mount({"/docs": docs, "/scratch": "memory://"})
        assert isinstance(storage, RoutingStorage)

        storage.save(StorageValue(P("/docs/a"), 1), context)
        storage.save(StorageValue(P("/scratch/b"), 2), context)
        assert docs.load(P("/a"), context).value == 1
        assert storage.load(P("/scratch/b"), context).value == 2
        assert storage.load(P("/docs/b"), context) is None

    def test_empty(self):
        """An empty mapping cannot be built."""
        with pytest.raises(EmptyRoutingTableError):
            mount({})

    def test_shadowed(self):
        """Nested mounts are rejected in mapping order."""
        with pytest.raises(ShadowedRouteError):
            mount({"/docs": "memory://", "/docs/old": "memory://"})
