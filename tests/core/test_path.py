"""Tests for the ``RPath`` value type."""

from __future__ import annotations

import copy
import os
import sys
from pathlib import Path, PurePosixPath

import pytest
from pytest_mock import MockerFixture

from rpath import (
    EnvUnavailableError,
    NoBasenameError,
    NoParentError,
    NotUTF8Error,
    RPath,
)

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX path semantics")


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Returns:
        Path: Root of the tree holding ``src/``, ``notes.txt`` and ``archive.tar.gz``.
    """
    (tmp_path / "src").mkdir()
    _ = (tmp_path / "notes.txt").write_text("notes", encoding="utf-8")
    _ = (tmp_path / "archive.tar.gz").write_bytes(b"")
    return tmp_path


# Construction ---------------------------------------------------------------


def test_from_accepts_str_path_and_rpath() -> None:
    """Strings, pathlib paths and RPath values build equal values."""
    rpath = RPath.from_("/temp")

    assert rpath == RPath.from_(Path("/temp"))
    assert rpath == RPath.from_(PurePosixPath("/temp"))
    assert rpath == RPath.from_(rpath)
    assert rpath == RPath("/temp")


@posix_only
def test_from_accepts_bytes() -> None:
    assert RPath.from_(b"/temp/abc.txt") == RPath.from_("/temp/abc.txt")


def test_from_rejects_non_path_like() -> None:
    with pytest.raises(TypeError):
        _ = RPath.from_(42)  # pyright: ignore[reportArgumentType]


def test_new_is_empty_path() -> None:
    rpath = RPath.new()

    assert rpath == RPath()
    assert rpath.convert_to_pathbuf() == Path()
    assert rpath.is_relative()


def test_pwd_matches_os_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert RPath.pwd().convert_to_pathbuf() == Path.cwd()
    assert RPath.pwd().convert_to_pathbuf() == Path(os.getcwd())


def test_pwd_raises_when_working_directory_is_gone(mocker: MockerFixture) -> None:
    _ = mocker.patch("rpath.core.path.Path.cwd", side_effect=FileNotFoundError(2, "No such file or directory"))

    with pytest.raises(EnvUnavailableError) as excinfo:
        _ = RPath.pwd()

    assert excinfo.value.what == "current dir"
    assert isinstance(excinfo.value, OSError)


@posix_only
def test_gethomedir_uses_home_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert RPath.gethomedir() == RPath.from_(tmp_path)


def test_gethomedir_raises_when_home_is_unknown(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rpath.core.path.Path.home",
        side_effect=RuntimeError("Could not determine home directory."),
    )

    with pytest.raises(EnvUnavailableError, match="homedir"):
        _ = RPath.gethomedir()


# Structural transforms ------------------------------------------------------


def test_join_appends_components() -> None:
    rpath = RPath.from_("/temp")

    assert rpath.join("abc").join("aaa") == RPath.from_("/temp/abc/aaa")
    assert rpath.join(Path("abc")) == rpath.join(RPath.from_("abc"))
    assert rpath == RPath.from_("/temp")


@posix_only
def test_join_absolute_component_replaces_path() -> None:
    assert RPath.from_("/temp").join("/etc/hosts") == RPath.from_("/etc/hosts")


def test_join_multiple_mutates_in_place() -> None:
    rpath = RPath.from_("/temp")

    result = rpath.join_multiple(["abc", Path("aaa")])

    assert result is None
    assert rpath == RPath.from_("/temp/abc/aaa")


def test_join_multiple_with_no_components_is_noop() -> None:
    rpath = RPath.from_("/temp/abc.txt")

    rpath.join_multiple([])

    assert rpath == RPath.from_("/temp/abc.txt")


def test_join_multiple_rejects_single_string() -> None:
    rpath = RPath.from_("/temp")

    with pytest.raises(TypeError):
        rpath.join_multiple("abc")

    assert rpath == RPath.from_("/temp")


def test_join_multiple_leaves_value_untouched_on_bad_component() -> None:
    rpath = RPath.from_("/temp")

    with pytest.raises(TypeError):
        rpath.join_multiple(["abc", 3])  # pyright: ignore[reportArgumentType]

    assert rpath == RPath.from_("/temp")


def test_basename_returns_final_segment() -> None:
    assert RPath.from_("/temp/abc.txt").basename() == "abc.txt"
    assert RPath.from_("relative/dir/").basename() == "dir"


@pytest.mark.parametrize("raw", ["/", "", ".", "a/.."])
def test_basename_without_final_segment_raises(raw: str) -> None:
    with pytest.raises(NoBasenameError):
        _ = RPath.from_(raw).basename()


@posix_only
def test_basename_rejects_undecodable_name() -> None:
    rpath = RPath.from_(b"/temp/\xff.txt")

    with pytest.raises(NotUTF8Error):
        _ = rpath.basename()


def test_dirname_returns_parent() -> None:
    assert RPath.from_("/temp/abc.txt").dirname() == RPath.from_("/temp")
    assert RPath.from_("abc.txt").dirname() == RPath.new()


@pytest.mark.parametrize("raw", ["/", ""])
def test_dirname_without_parent_raises(raw: str) -> None:
    with pytest.raises(NoParentError):
        _ = RPath.from_(raw).dirname()


def test_with_basename_replaces_final_segment() -> None:
    rpath = RPath.from_("/temp/abc.txt")

    assert rpath.with_basename("xyz.txt") == RPath.from_("/temp/xyz.txt")
    assert rpath.with_basename("xyz.txt") == rpath.dirname().join("xyz.txt")


def test_with_dirname_moves_basename() -> None:
    rpath = RPath.from_("/temp/abc.txt")

    assert rpath.with_dirname("/temp/temp2") == RPath.from_("/temp/temp2/abc.txt")
    assert rpath.with_dirname(Path("other")) == RPath.from_("other/abc.txt")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/temp/abc.txt", "txt"),
        ("a.b.c", "c"),
        ("noext", "noext"),
        (".bashrc", "bashrc"),
        ("archive.", ""),
    ],
)
def test_extension(raw: str, expected: str) -> None:
    assert RPath.from_(raw).extension() == expected


def test_extension_of_root_raises() -> None:
    with pytest.raises(NoBasenameError):
        _ = RPath.from_("/").extension()


def test_expand_resolves_existing_path(tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tree)

    assert RPath.from_("./src").expand() == RPath.pwd().join("src")
    assert RPath.from_("src/../notes.txt").expand() == RPath.pwd().join("notes.txt")


def test_expand_keeps_missing_path(tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tree)
    rpath = RPath.from_("./missing")

    expanded = rpath.expand()

    assert expanded == RPath.from_("./missing")
    assert expanded is not rpath


def test_expand_follows_symlinks(tree: Path) -> None:
    link = tree / "link"
    try:
        link.symlink_to(tree / "src", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")

    assert RPath.from_(link).expand() == RPath.from_(tree / "src").expand()


def test_clear_resets_to_empty() -> None:
    rpath = RPath.from_("/temp/abc.txt")

    rpath.clear()

    assert rpath == RPath.new()


# Predicates -----------------------------------------------------------------


def test_filesystem_predicates(tree: Path) -> None:
    directory = RPath.from_(tree / "src")
    file = RPath.from_(tree / "notes.txt")
    missing = RPath.from_(tree / "missing")

    assert directory.exists() and directory.is_dir() and not directory.is_file()
    assert file.exists() and file.is_file() and not file.is_dir()
    assert not missing.exists()
    assert not missing.is_dir()
    assert not missing.is_file()
    assert not missing.is_symlink()


def test_is_symlink_detects_dangling_link(tree: Path) -> None:
    link = tree / "dangling"
    try:
        link.symlink_to(tree / "nowhere")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")

    rpath = RPath.from_(link)
    assert rpath.is_symlink()
    assert not rpath.exists()


@posix_only
def test_absolute_and_relative_are_syntactic() -> None:
    assert RPath.from_("/nowhere/at/all").is_absolute()
    assert not RPath.from_("/nowhere/at/all").is_relative()
    assert RPath.from_("./temp").is_relative()
    assert not RPath.from_("./temp").is_absolute()


# Conversions ----------------------------------------------------------------


@pytest.mark.parametrize("raw", ["/temp/abc.txt", "relative/dir/", "a//b", "./x", ""])
def test_convert_to_string_matches_pathlib_rendering(raw: str) -> None:
    text = RPath.from_(raw).convert_to_string()

    assert text == str(Path(raw))
    assert RPath.from_(text).convert_to_string() == text


@posix_only
def test_convert_to_string_is_lossy_for_undecodable_bytes() -> None:
    rpath = RPath.from_(b"/temp/\xff.txt")

    assert rpath.convert_to_string() == "/temp/\ufffd.txt"
    assert os.fsencode(rpath) == b"/temp/\xff.txt"


def test_convert_to_pathbuf_returns_equal_path() -> None:
    assert RPath.from_("/temp/abc.txt").convert_to_pathbuf() == Path("/temp/abc.txt")


def test_dunder_conversions() -> None:
    rpath = RPath.from_("temp/abc.txt")

    assert str(rpath) == str(Path("temp/abc.txt"))
    assert os.fspath(rpath) == str(Path("temp/abc.txt"))
    assert Path(rpath) == Path("temp/abc.txt")
    assert repr(rpath) == f"RPath({str(Path('temp/abc.txt'))!r})"


def test_read_dir_lists_entries(tree: Path) -> None:
    names = sorted(entry.name for entry in RPath.from_(tree).read_dir())

    assert names == ["archive.tar.gz", "notes.txt", "src"]


def test_read_dir_is_one_shot(tree: Path) -> None:
    entries = RPath.from_(tree).read_dir()

    assert len(list(entries)) == 3
    assert list(entries) == []


def test_read_dir_raises_for_missing_or_file(tree: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = RPath.from_(tree / "missing").read_dir()
    with pytest.raises(NotADirectoryError):
        _ = RPath.from_(tree / "notes.txt").read_dir()


def test_print_writes_string_form(capsys: pytest.CaptureFixture[str]) -> None:
    RPath.from_("/temp/abc.txt").print()

    assert capsys.readouterr().out == str(Path("/temp/abc.txt")) + "\n"


@posix_only
def test_print_keeps_tabs_and_control_characters(capsys: pytest.CaptureFixture[str]) -> None:
    RPath.from_("/tmp/a\tb").print()
    RPath.from_("/tmp/[bold]x\x1by").print()

    assert capsys.readouterr().out == "/tmp/a\tb\n/tmp/[bold]x\x1by\n"


def test_read_dir_closes_as_context_manager(tree: Path) -> None:
    with RPath.from_(tree).read_dir() as entries:
        first = next(entries)

    assert first.name in {"archive.tar.gz", "notes.txt", "src"}
    assert list(entries) == []


# Value semantics ------------------------------------------------------------


def test_equality_hash_and_ordering() -> None:
    a = RPath.from_("/a")
    b = RPath.from_("/b")

    assert a == RPath.from_("/a/")
    assert a != b
    assert len({a, RPath.from_("/a"), b}) == 2
    assert sorted([b, a]) == [a, b]
    assert a != "/a"


def test_clone_is_independent() -> None:
    original = RPath.from_("/temp")

    for duplicate in (original.clone(), copy.copy(original), copy.deepcopy(original)):
        duplicate.join_multiple(["abc"])
        assert duplicate == RPath.from_("/temp/abc")

    assert original == RPath.from_("/temp")
