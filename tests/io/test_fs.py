import pytest
from buildmatrix.exceptions import BMDecodeError, BMIOError, BMNotAFileError, BMPathNotFoundError
from buildmatrix.io import DiskFileSystem, FileSystem, create_fs, wrap_io_error


@pytest.fixture
def fs():
    return create_fs()


class TestDiskFileSystem:
    """Tests for the fsspec-backed local file system."""

    def test_create_fs_returns_disk(self, fs):
        assert isinstance(fs, DiskFileSystem)
        assert isinstance(fs, FileSystem)

    def test_read_text(self, fs, tmp_path):
        (tmp_path / "a.txt").write_text("hello\n")
        assert fs.read_text(str(tmp_path / "a.txt")) == "hello\n"

    def test_read_missing_file_is_wrapped(self, fs, tmp_path):
        with pytest.raises(BMPathNotFoundError):
            fs.read_text(str(tmp_path / "missing.txt"))

    def test_read_undecodable_file_is_wrapped(self, fs, tmp_path):
        (tmp_path / "a.txt").write_bytes(b"caf\xe9\n")
        with pytest.raises(BMDecodeError):
            fs.read_text(str(tmp_path / "a.txt"))

    def test_read_with_replace_handler(self, fs, tmp_path):
        (tmp_path / "a.txt").write_bytes(b"caf\xe9\n")
        assert fs.read_text(str(tmp_path / "a.txt"), errors="replace") == "caf\ufffd\n"

    def test_append_text(self, fs, tmp_path):
        target = tmp_path / "out" / "file.txt"
        fs.append_text(str(target), "a=1\n")
        fs.append_text(str(target), "b=2\n")
        assert target.read_text() == "a=1\nb=2\n"

    def test_append_to_directory_is_wrapped(self, fs, tmp_path):
        with pytest.raises(BMIOError):
            fs.append_text(str(tmp_path), "x")

    def test_predicates(self, fs, tmp_path):
        (tmp_path / "dir").mkdir()
        (tmp_path / "file").write_text("")
        assert fs.is_dir(str(tmp_path / "dir"))
        assert not fs.is_file(str(tmp_path / "dir"))
        assert fs.is_file(str(tmp_path / "file"))
        assert fs.exists(str(tmp_path / "file"))
        assert not fs.exists(str(tmp_path / "nope"))

    def test_listdir_returns_names(self, fs, tmp_path):
        (tmp_path / "b").mkdir()
        (tmp_path / "a.txt").write_text("")
        assert sorted(fs.listdir(str(tmp_path))) == ["a.txt", "b"]

    def test_find_is_recursive_and_files_only(self, fs, tmp_path):
        (tmp_path / "x" / "y").mkdir(parents=True)
        (tmp_path / "x" / "y" / "Dockerfile").write_text("")
        (tmp_path / "top").write_text("")
        found = sorted(p.rsplit("/", 1)[-1] for p in fs.find(str(tmp_path)))
        assert found == ["Dockerfile", "top"]


class TestWrapIOError:

    @pytest.mark.parametrize("raised, expected", [
        (FileNotFoundError("x"), BMPathNotFoundError),
        (IsADirectoryError("x"), BMNotAFileError),
    ])
    def test_mapping(self, raised, expected):
        @wrap_io_error
        def boom():
            raise raised

        with pytest.raises(expected):
            boom()

    def test_other_errors_pass_through(self):
        @wrap_io_error
        def boom():
            raise ValueError("not io")

        with pytest.raises(ValueError):
            boom()
