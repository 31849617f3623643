"""Tests for mountstore.path."""

import pytest

from mountstore import InvalidNameError, InvalidPathError, StorageName, StoragePath

P = StoragePath.parse


class TestStorageName:
    """Tests for StorageName."""

    def test_value(self):
        """Name keeps its text."""
        assert StorageName("file123.txt").value == "file123.txt"
        assert str(StorageName("file123.txt")) == "file123.txt"

    def test_empty_fails(self):
        """Empty names are rejected."""
        with pytest.raises(InvalidNameError):
            StorageName("")

    def test_none_fails(self):
        """None is rejected."""
        with pytest.raises(TypeError):
            StorageName(None)

    def test_max_length(self):
        """Names are limited to 255 characters."""
        assert StorageName("A" * 255).value == "A" * 255
        with pytest.raises(InvalidNameError):
            StorageName("A" * 256)

    def test_separator_fails(self):
        """Names cannot contain the separator."""
        with pytest.raises(InvalidNameError):
            StorageName("a/b")

    def test_non_printable_fails(self):
        """Names cannot contain control characters."""
        with pytest.raises(InvalidNameError):
            StorageName("a\tb")

    def test_spaces_allowed(self):
        """Spaces are printable and allowed."""
        assert StorageName("path to").value == "path to"

    def test_case_sensitive(self):
        """Names differing only in case are different."""
        assert StorageName("abc") != StorageName("ABC")
        assert StorageName("abc") == StorageName("abc")
        assert hash(StorageName("abc")) == hash(StorageName("abc"))

    def test_ordering(self):
        """Names order by their text."""
        assert StorageName("abc.txt") < StorageName("file123.txt")

    def test_root(self):
        """ROOT is distinguished from ordinary names."""
        assert StorageName.ROOT.is_root()
        assert StorageName.ROOT.value == "/"
        assert not StorageName("root").is_root()

    def test_file_extension(self):
        """Extension is the text after the last dot."""
        assert StorageName("xyz").file_extension is None
        assert StorageName("xyz.").file_extension == ""
        assert StorageName("xyz.txt").file_extension == "txt"
        assert StorageName("xyz.EXE").file_extension == "EXE"
        assert StorageName("archive.tar.gz").file_extension == "gz"


class TestParse:
    """Tests for StoragePath.parse."""

    def test_missing_leading_slash_fails(self):
        """Paths must be absolute."""
        with pytest.raises(InvalidPathError):
            P("relative/path")

    def test_empty_component_fails(self):
        """Double slashes are rejected."""
        with pytest.raises(InvalidPathError) as raised:
            P("/before//after")
        assert "/before//after" in str(raised.value)

    def test_trailing_slash_fails(self):
        """A trailing slash is an empty component."""
        with pytest.raises(InvalidPathError):
            P("/before/")

    def test_root(self):
        """"/" parses to the ROOT singleton."""
        path = P("/")
        assert path is StoragePath.ROOT
        assert path.is_root()
        assert path.parent is None
        assert path.name is StorageName.ROOT

    def test_flat(self):
        """Single segment path."""
        path = P("/path to")
        assert path.value == "/path to"
        assert path.name == StorageName("path to")
        assert path.parent is StoragePath.ROOT

    def test_hierarchical(self):
        """Parents are linked up to ROOT."""
        path = P("/path/to/xyz")
        assert path.value == "/path/to/xyz"
        assert path.name == StorageName("xyz")
        assert path.parent == P("/path/to")
        assert path.parent.parent == P("/path")
        assert path.parent.parent.parent is StoragePath.ROOT

    def test_dot_resolution(self):
        """"." is ignored and ".." moves to the parent."""
        assert P("/a/./b/../c") == P("/a/c")
        assert str(P("/a/./b/../c")) == "/a/c"

    def test_dot_dot_clamped_at_root(self):
        """".." above ROOT stays at ROOT."""
        assert P("/..") is StoragePath.ROOT
        assert P("/../../a") == P("/a")

    def test_reparse_is_stable(self):
        """Parsing the text of a parsed path gives an equal path."""
        for text in ("/", "/a", "/a/b/c", "/a/./b/../c", "/x/../../y/z.txt"):
            parsed = P(text)
            assert P(str(parsed)) == parsed

    def test_root_is_identity(self):
        """Only the singleton is root, equal copies are not."""
        copy = StoragePath("/", StorageName.ROOT, None)
        assert copy == StoragePath.ROOT
        assert not copy.is_root()
        assert P("/a/..") is StoragePath.ROOT


class TestAppend:
    """Tests for StoragePath.append and prepend."""

    def test_append_name_to_root(self):
        """Appending to ROOT does not double the separator."""
        path = StoragePath.ROOT.append(StorageName("name1"))
        assert path.value == "/name1"
        assert path.parent is StoragePath.ROOT

    def test_append_name_to_non_root(self):
        """Appending a name links the original as parent."""
        parent = P("/parent1")
        path = parent.append(StorageName("name2"))
        assert path.value == "/parent1/name2"
        assert path.parent is parent

    def test_append_special_names(self):
        """".", ".." and ROOT names are resolved."""
        path = P("/a/b")
        assert path.append(StorageName(".")) is path
        assert path.append(StorageName.ROOT) is path
        assert path.append(StorageName("..")) == P("/a")
        assert StoragePath.ROOT.append(StorageName("..")) is StoragePath.ROOT

    def test_append_path(self):
        """Appending a path appends each of its names."""
        path = P("/parent1").append(P("/path2")).append(P("/path3/path4"))
        assert path.value == "/parent1/path2/path3/path4"
        assert path.parent.value == "/parent1/path2/path3"

    def test_append_root_path(self):
        """Appending ROOT is a no-op."""
        path = P("/a")
        assert path.append(StoragePath.ROOT) is path

    def test_prepend(self):
        """Prepend puts the prefix first."""
        assert P("/b/c").prepend(P("/a")) == P("/a/b/c")
        assert P("/b").prepend(StorageName("a")) == P("/a/b")
        assert P("/b").prepend(StoragePath.ROOT) == P("/b")

    def test_names(self):
        """names() yields segments from the root down."""
        assert [n.value for n in P("/a/b/c").names()] == ["a", "b", "c"]
        assert list(StoragePath.ROOT.names()) == []


class TestRemovePrefix:
    """Tests for StoragePath.remove_prefix."""

    def test_root_prefix(self):
        """Removing ROOT returns the same path."""
        path = P("/a/b")
        assert path.remove_prefix(StoragePath.ROOT) is path

    def test_same(self):
        """Removing the path itself gives ROOT."""
        assert P("/a/b").remove_prefix(P("/a/b")) is StoragePath.ROOT

    def test_ancestor(self):
        """Removing an ancestor gives the relative path."""
        assert P("/a/b/c").remove_prefix(P("/a")) == P("/b/c")

    def test_not_ancestor_fails(self):
        """Unrelated prefixes are rejected."""
        with pytest.raises(InvalidPathError):
            P("/a/b").remove_prefix(P("/x"))

    def test_partial_segment_fails(self):
        """A prefix must end on a segment boundary."""
        with pytest.raises(InvalidPathError):
            P("/abc/d").remove_prefix(P("/ab"))

    def test_round_trip(self):
        """prefix + (path - prefix) == path."""
        path = P("/a/b/c/d.txt")
        for prefix in (StoragePath.ROOT, P("/a"), P("/a/b"), P("/a/b/c"), path):
            assert prefix.append(path.remove_prefix(prefix)) == path

    def test_starts_with(self):
        """starts_with follows segment boundaries."""
        assert P("/a/b").starts_with(P("/a"))
        assert P("/a/b").starts_with(P("/a/b"))
        assert P("/a/b").starts_with(StoragePath.ROOT)
        assert not P("/ab").starts_with(P("/a"))


class TestComparison:
    """Tests for StoragePath equality and ordering."""

    def test_equality(self):
        """Equal text means equal paths."""
        assert P("/a/b") == P("/a/b")
        assert hash(P("/a/b")) == hash(P("/a/b"))
        assert P("/a/b") != P("/a/B")
        assert P("/a") != "/a"

    def test_ordering(self):
        """Paths order by their full text."""
        assert P("/before") < P("/path")
        assert P("/zebra") > P("/path")
        assert sorted([P("/b"), P("/a/z"), P("/a")]) == [P("/a"), P("/a/z"), P("/b")]
