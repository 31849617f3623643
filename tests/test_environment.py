"""Tests for EnvironmentStorage."""

import pytest

from mountstore import (
    EnvironmentStorage,
    InvalidEnvironmentNameError,
    StoragePath,
    StorageValue,
)

P = StoragePath.parse


@pytest.fixture
def storage():
    return EnvironmentStorage()


class TestEnvironmentStorage:
    """Tests for EnvironmentStorage."""

    def test_load(self, storage, context):
        """The leaf name selects the environment value."""
        context.environment.set("locale", "en-AU")
        assert storage.load(P("/locale"), context) == StorageValue(P("/locale"), "en-AU")
        assert storage.load(P("/dir/locale"), context) == StorageValue(P("/dir/locale"), "en-AU")

    def test_load_missing(self, storage, context):
        """Unknown names load as None."""
        assert storage.load(P("/unknown"), context) is None

    def test_load_invalid_name(self, storage, context):
        """Invalid names load as None instead of failing."""
        assert storage.load(P("/1invalid"), context) is None
        assert storage.load(StoragePath.ROOT, context) is None

    def test_save(self, storage, context):
        """Saving sets the environment value."""
        saved = storage.save(StorageValue(P("/locale"), "en-GB"), context)
        assert saved == StorageValue(P("/locale"), "en-GB")
        assert context.environment.get("locale") == "en-GB"

    def test_save_none_removes(self, storage, context):
        """Saving without payload removes the value."""
        context.environment.set("locale", "en-AU")
        saved = storage.save(StorageValue(P("/locale")), context)
        assert saved.value is None
        assert "locale" not in context.environment

    def test_save_invalid_name_fails(self, storage, context):
        """Saving to an invalid name raises."""
        with pytest.raises(InvalidEnvironmentNameError):
            storage.save(StorageValue(P("/1invalid"), 1), context)

    def test_delete(self, storage, context):
        """Delete removes the value."""
        context.environment.set("locale", "en-AU")
        storage.delete(P("/locale"), context)
        assert "locale" not in context.environment

    def test_delete_invalid_name_ignored(self, storage, context):
        """Deleting an invalid name is a no-op."""
        storage.delete(P("/1invalid"), context)
        storage.delete(StoragePath.ROOT, context)

    def test_list(self, storage, context):
        """Names are listed under ROOT, filtered by the parent text."""
        for name in ("alpha", "alpine", "beta"):
            context.environment.set(name, name)

        infos = storage.list(StoragePath.ROOT, 0, 10, context)
        assert [str(i.path) for i in infos] == ["/alpha", "/alpine", "/beta"]
        assert len({i.audit_info for i in infos}) == 1

        infos = storage.list(P("/alp"), 0, 10, context)
        assert [str(i.path) for i in infos] == ["/alpha", "/alpine"]

        infos = storage.list(StoragePath.ROOT, 1, 1, context)
        assert [str(i.path) for i in infos] == ["/alpine"]

    def test_mounted(self, context):
        """Environment values can be mounted under a prefix."""
        from mountstore import mount

        storage = mount({"/env": EnvironmentStorage()})
        context.environment.set("locale", "en-AU")
        assert storage.load(P("/env/locale"), context) == StorageValue(P("/env/locale"), "en-AU")
