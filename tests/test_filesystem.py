import pytest

from minifs.filesystem import (
    MAX_CONTENT,
    Directory,
    File,
    FileSystem,
    FileSystemError,
    NotFoundError,
    PermissionDeniedError,
)
from minifs.permissions import FileType, Permission


@pytest.fixture
def fs():
    return FileSystem()


def test_starts_at_root(fs):
    assert fs.current is fs.root
    assert fs.root.name == "/"
    assert fs.root.parent is None
    assert fs.user == "admin"


def test_mkdir_and_cd_round_trip(fs):
    made = fs.mkdir("docs")
    assert fs.cd("docs") is made
    assert fs.current.parent is fs.root
    assert fs.cd("..") is fs.root
    assert fs.current is fs.root


def test_cd_missing_raises(fs):
    with pytest.raises(NotFoundError):
        fs.cd("nowhere")
    assert fs.current is fs.root


def test_cd_up_at_root_raises(fs):
    with pytest.raises(NotFoundError):
        fs.cd("..")


def test_ls_lists_newest_first_dirs_before_files(fs):
    fs.mkdir("a")
    fs.mkdir("b")
    fs.touch("x")
    fs.touch("y")
    assert [entry.name for entry in fs.ls()] == ["b", "a", "y", "x"]
    kinds = [isinstance(entry, Directory) for entry in fs.ls()]
    assert kinds == [True, True, False, False]


def test_touch_defaults(fs):
    first = fs.touch("one")
    second = fs.touch("two")
    assert isinstance(first, File)
    assert (first.id, second.id) == (1, 2)
    assert first.owner == "admin"
    assert first.permission == Permission(7, 5, 5)
    assert first.type is FileType.TEXT
    assert first.content == ""
    assert first.size == 0
    assert first.created == first.modified == first.accessed


def test_echo_cat_round_trip(fs):
    fs.touch("notes")
    written = fs.echo("notes", "hello world")
    assert fs.cat("notes") == "hello world"
    assert written.size == len("hello world")
    assert written.modified >= written.created


def test_echo_truncates(fs):
    fs.touch("big")
    fs.echo("big", "a" * (MAX_CONTENT * 2))
    content = fs.cat("big")
    assert len(content) == MAX_CONTENT - 1
    assert set(content) == {"a"}


def test_operations_on_missing_file_raise(fs):
    for action in (
        lambda: fs.cat("ghost"),
        lambda: fs.echo("ghost", "x"),
        lambda: fs.chmod("ghost", 777),
        lambda: fs.rm("ghost"),
    ):
        with pytest.raises(NotFoundError):
            action()


def test_chmod_sets_permission(fs):
    fs.touch("f")
    fs.chmod("f", 640)
    assert fs.current.find_file("f").permission == Permission.from_mode(640)


def test_owner_without_bits_is_denied(fs):
    fs.touch("locked")
    fs.chmod("locked", 0)
    with pytest.raises(PermissionDeniedError):
        fs.cat("locked")
    with pytest.raises(PermissionDeniedError):
        fs.echo("locked", "x")
    with pytest.raises(PermissionDeniedError):
        fs.rm("locked")
    assert fs.current.find_file("locked") is not None


def test_other_user_uses_others_digit(fs):
    fs.touch("shared")
    fs.echo("shared", "data")
    fs.su("guest")
    assert fs.user == "guest"
    assert fs.cat("shared") == "data"
    with pytest.raises(PermissionDeniedError):
        fs.echo("shared", "changed")
    with pytest.raises(PermissionDeniedError):
        fs.rm("shared")
    fs.chmod("shared", 750)
    with pytest.raises(PermissionDeniedError):
        fs.cat("shared")


def test_new_file_owned_by_current_user(fs):
    fs.su("guest")
    assert fs.touch("mine").owner == "guest"


def test_rm_removes_file(fs):
    fs.touch("gone")
    fs.touch("kept")
    fs.rm("gone")
    assert [entry.name for entry in fs.ls()] == ["kept"]
    with pytest.raises(NotFoundError):
        fs.cat("gone")


def test_files_are_per_directory(fs):
    fs.touch("top")
    fs.mkdir("sub")
    fs.cd("sub")
    assert fs.ls() == []
    with pytest.raises(FileSystemError):
        fs.cat("top")


def test_find_helpers(fs):
    fs.mkdir("d")
    fs.touch("f")
    assert fs.root.find_subdir("d").name == "d"
    assert fs.root.find_file("f").name == "f"
    assert fs.root.find_subdir("f") is None
    assert fs.root.find_file("d") is None