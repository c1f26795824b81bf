from wordclock.filesystem import load_from_file


def test_reads_text(tmp_path):
    path = tmp_path / "layout.txt"
    path.write_text("HETKISAVIJF\nTIENVOORNA\n")
    assert load_from_file(path) == "HETKISAVIJF\nTIENVOORNA\n"


def test_accepts_string_path(tmp_path):
    path = tmp_path / "tz.txt"
    path.write_text("CET-1CEST")
    assert load_from_file(str(path)) == "CET-1CEST"


def test_missing_file_gives_empty(tmp_path):
    assert load_from_file(tmp_path / "absent.txt") == ""


def test_directory_gives_empty(tmp_path):
    assert load_from_file(tmp_path) == ""


def test_bytes_map_to_characters(tmp_path):
    path = tmp_path / "raw.bin"
    raw = bytes(range(256))
    path.write_bytes(raw)
    result = load_from_file(path)
    assert len(result) == 256
    assert [ord(ch) for ch in result] == list(raw)