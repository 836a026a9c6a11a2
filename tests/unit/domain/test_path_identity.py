"""
Unit tests for the PathIdentity value object.
"""

from pathlib import PurePosixPath
from urllib.parse import urlparse

import pytest

from vfile.domain.value_objects.path_identity import PathIdentity
from vfile.domain.exceptions.domain_exceptions import (
    InvalidBasenameError,
    InvalidExtensionError,
    InvalidPathError,
    InvalidStemError,
    MissingBasenameError,
    MissingPathError,
)


class TestPathIdentityReads:
    """Tests for derived facets."""

    def test_empty_identity_has_no_facets(self, identity: PathIdentity):
        """Test every facet is absent without a path."""
        assert identity.path() is None
        assert identity.directory() is None
        assert identity.basename() is None
        assert identity.extension() is None
        assert identity.stem() is None
        assert identity.history() == ()

    def test_facets_of_full_path(self, script_identity: PathIdentity):
        """Test facets derived from a nested path with a dotted stem."""
        assert script_identity.directory() == "/a/b"
        assert script_identity.basename() == "index.min.js"
        assert script_identity.stem() == "index.min"
        assert script_identity.extension() == ".js"

    def test_bare_name_directory_is_dot(self, identity: PathIdentity):
        """Test the directory of a bare file name."""
        identity.set_path("readme.md")
        assert identity.directory() == "."
        assert identity.basename() == "readme.md"

    def test_dotfile_has_no_extension(self, identity: PathIdentity):
        """Test dotfiles keep their whole name as stem."""
        identity.set_path("/home/user/.bashrc")
        assert identity.extension() == ""
        assert identity.stem() == ".bashrc"

    def test_path_is_last_history_entry(self, posix_paths, url_converter):
        """Test the current path comes from the end of the history."""
        identity = PathIdentity(
            posix_paths, url_converter, history=["/old.js", "/new.js"]
        )
        assert identity.path() == "/new.js"
        assert identity.history() == ("/old.js", "/new.js")

    def test_history_is_copied(self, posix_paths, url_converter):
        """Test the initial history list is not shared."""
        history = ["/a.js"]
        identity = PathIdentity(posix_paths, url_converter, history=history)
        identity.set_path("/b.js")
        assert history == ["/a.js"]


class TestSetPath:
    """Tests for set_path."""

    def test_set_path_appends(self, identity: PathIdentity):
        """Test a new path is appended to the history."""
        identity.set_path("/a/b.js")
        assert identity.path() == "/a/b.js"
        assert identity.history() == ("/a/b.js",)

    def test_set_same_path_is_noop(self, identity: PathIdentity):
        """Test setting the current path again does not grow the history."""
        identity.set_path("/a/b.js")
        identity.set_path("/a/b.js")
        assert len(identity.history()) == 1

    def test_rename_keeps_previous_path(self, identity: PathIdentity):
        """Test renames are kept in order."""
        identity.set_path("/a/b.js")
        identity.set_path("/a/c.js")
        identity.set_path("/a/b.js")
        assert identity.history() == ("/a/b.js", "/a/c.js", "/a/b.js")

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_path_rejected(self, identity: PathIdentity, value):
        """Test empty paths are rejected."""
        with pytest.raises(InvalidPathError, match="`path` cannot be empty"):
            identity.set_path(value)
        assert identity.history() == ()

    def test_non_string_path_rejected(self, identity: PathIdentity):
        """Test arbitrary objects are not accepted as paths."""
        with pytest.raises(InvalidPathError):
            identity.set_path(42)

    def test_file_url_is_converted(self, identity: PathIdentity):
        """Test file URL objects become plain paths."""
        identity.set_path(urlparse("file:///tmp/some%20file.txt"))
        assert identity.path() == "/tmp/some file.txt"

    def test_non_file_url_rejected(self, identity: PathIdentity):
        """Test URLs with another scheme are rejected."""
        with pytest.raises(InvalidPathError, match="scheme file"):
            identity.set_path(urlparse("https://example.com/a.js"))

    def test_path_like_is_converted(self, identity: PathIdentity):
        """Test os.PathLike values become plain paths."""
        identity.set_path(PurePosixPath("/a/b/c.txt"))
        assert identity.path() == "/a/b/c.txt"


class TestSetBasename:
    """Tests for set_basename."""

    def test_set_basename_recomputes_facets(self, script_identity: PathIdentity):
        """Test stem and extension follow a new basename."""
        script_identity.set_basename("main.ts")
        assert script_identity.path() == "/a/b/main.ts"
        assert script_identity.basename() == "main.ts"
        assert script_identity.stem() == "main"
        assert script_identity.extension() == ".ts"

    def test_set_basename_without_path(self, identity: PathIdentity):
        """Test a basename can originate a path."""
        identity.set_basename("index.js")
        assert identity.path() == "index.js"

    def test_empty_basename_rejected(self, script_identity: PathIdentity):
        """Test empty basenames are rejected."""
        with pytest.raises(InvalidBasenameError, match="cannot be empty"):
            script_identity.set_basename("")

    def test_basename_with_separator_rejected(self, script_identity: PathIdentity):
        """Test a basename cannot smuggle in a deeper path."""
        with pytest.raises(InvalidBasenameError, match="cannot be a path"):
            script_identity.set_basename("c/d.js")
        assert len(script_identity.history()) == 1


class TestSetDirectory:
    """Tests for set_directory."""

    def test_move_file(self, script_identity: PathIdentity):
        """Test moving a file keeps its basename."""
        script_identity.set_directory("/x/y")
        assert script_identity.path() == "/x/y/index.min.js"
        assert script_identity.history() == ("/a/b/index.min.js", "/x/y/index.min.js")

    def test_empty_directory_makes_bare_name(self, script_identity: PathIdentity):
        """Test clearing the directory leaves the basename."""
        script_identity.set_directory(None)
        assert script_identity.path() == "index.min.js"

    def test_same_directory_is_noop(self, script_identity: PathIdentity):
        """Test setting the current directory again does not grow history."""
        script_identity.set_directory("/a/b")
        assert len(script_identity.history()) == 1

    def test_directory_requires_basename(self, identity: PathIdentity):
        """Test a directory cannot be set on a path-less identity."""
        with pytest.raises(MissingBasenameError, match="requires `path`"):
            identity.set_directory("/a")


class TestSetExtension:
    """Tests for set_extension."""

    def test_change_extension(self, script_identity: PathIdentity):
        """Test swapping the extension keeps the stem."""
        script_identity.set_extension(".ts")
        assert script_identity.path() == "/a/b/index.min.ts"

    @pytest.mark.parametrize("value", ["", None])
    def test_remove_extension(self, script_identity: PathIdentity, value):
        """Test an empty extension removes it."""
        script_identity.set_extension(value)
        assert script_identity.path() == "/a/b/index.min"
        assert script_identity.stem() == "index"

    def test_extension_without_dot_rejected(self, script_identity: PathIdentity):
        """Test the leading dot is required."""
        with pytest.raises(InvalidExtensionError, match="must start with `.`"):
            script_identity.set_extension("js")

    def test_extension_with_two_dots_rejected(self, script_identity: PathIdentity):
        """Test compound extensions are rejected."""
        with pytest.raises(InvalidExtensionError, match="multiple dots"):
            script_identity.set_extension(".min.js")

    def test_extension_with_separator_rejected(self, script_identity: PathIdentity):
        """Test extensions cannot contain a separator."""
        with pytest.raises(InvalidExtensionError, match="cannot be a path"):
            script_identity.set_extension(".j/s")

    def test_extension_requires_path(self, identity: PathIdentity):
        """Test an extension cannot be set on a path-less identity."""
        with pytest.raises(MissingPathError, match="requires `path`"):
            identity.set_extension(".js")


class TestSetStem:
    """Tests for set_stem."""

    def test_change_stem(self, script_identity: PathIdentity):
        """Test changing the stem keeps directory and extension."""
        script_identity.set_stem("bundle")
        assert script_identity.path() == "/a/b/bundle.js"

    def test_empty_stem_rejected(self, script_identity: PathIdentity):
        """Test empty stems are rejected."""
        with pytest.raises(InvalidStemError, match="cannot be empty"):
            script_identity.set_stem("")

    def test_stem_with_separator_rejected(self, script_identity: PathIdentity):
        """Test a stem cannot contain a separator."""
        with pytest.raises(InvalidStemError, match="cannot be a path"):
            script_identity.set_stem("x/y")

    def test_stem_requires_basename(self, identity: PathIdentity):
        """Test a stem cannot originate a path."""
        with pytest.raises(MissingBasenameError):
            identity.set_stem("index")
        assert identity.history() == ()


class TestRootLevelFile:
    """Tests for facet setters on a file directly under the root."""

    def test_set_basename(self, root_identity: PathIdentity):
        root_identity.set_basename("b.js")
        assert root_identity.path() == "/b.js"
        assert root_identity.history() == ("/a.js", "/b.js")

    def test_set_stem(self, root_identity: PathIdentity):
        root_identity.set_stem("c")
        assert root_identity.path() == "/c.js"
        assert root_identity.history() == ("/a.js", "/c.js")

    def test_set_extension(self, root_identity: PathIdentity):
        root_identity.set_extension(".ts")
        assert root_identity.path() == "/a.ts"
        assert root_identity.history() == ("/a.js", "/a.ts")

    def test_set_directory_to_root(self, posix_paths, url_converter):
        """Test moving a nested file up to the root."""
        identity = PathIdentity(posix_paths, url_converter, history=["/x/a.js"])
        identity.set_directory("/")
        assert identity.path() == "/a.js"
        assert identity.history() == ("/x/a.js", "/a.js")

    def test_set_root_directory_is_noop(self, root_identity: PathIdentity):
        """Test the root directory of a root-level file is unchanged."""
        assert root_identity.directory() == "/"
        root_identity.set_directory("/")
        assert root_identity.history() == ("/a.js",)
