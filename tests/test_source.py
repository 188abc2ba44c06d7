import pytest

from rotate.source import FileReadError, SourceFile, read_source


def _write(tmp_path, filename, data: bytes):
    path = tmp_path / filename
    path.write_bytes(data)
    return str(path)


def test_reads_contents(tmp_path):
    text = "let x = 10\nfn main() {}\n"
    path = _write(tmp_path, "main.vr", text.encode())
    source = read_source(path)
    assert source.contents == text
    assert source.name == path
    assert source.length == len(text)


def test_accepts_path_objects(tmp_path):
    path = tmp_path / "prog.vr"
    path.write_bytes(b"import x")
    source = read_source(path)
    assert source.contents == "import x"
    assert source.name == str(path)


def test_leading_whitespace_allowed(tmp_path):
    path = _write(tmp_path, "ws.vr", b"\n\t  let a = 1")
    assert read_source(path).contents == "\n\t  let a = 1"


def test_length_matches_bytes_for_non_ascii_body(tmp_path):
    data = "a = 'é'".encode("utf-8")
    path = _write(tmp_path, "u.vr", data)
    assert read_source(path).length == len(data)


def test_name_too_short():
    with pytest.raises(FileReadError, match="too short"):
        read_source("vr")


def test_wrong_extension(tmp_path):
    path = _write(tmp_path, "main.txt", b"let a = 1")
    with pytest.raises(FileReadError, match="must end with .vr"):
        read_source(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileReadError, match="File does not exist"):
        read_source(str(tmp_path / "absent.vr"))


def test_empty_file(tmp_path):
    path = _write(tmp_path, "empty.vr", b"")
    with pytest.raises(FileReadError, match="File is empty"):
        read_source(path)


@pytest.mark.parametrize("first", [b"\x00", b"\x01", b"\x7f", b"\xff"])
def test_binary_first_byte_rejected(tmp_path, first):
    path = _write(tmp_path, "bin.vr", first + b"abc")
    with pytest.raises(FileReadError, match="Only ASCII text files"):
        read_source(path)


def test_source_file_is_immutable():
    source = SourceFile(name="a.vr", contents="x")
    with pytest.raises(AttributeError):
        source.contents = "y"
    assert source.contents == "x"