import pytest

from pacmaze.maploader import MapFileError, parse_map, read_map

SAMPLE_ROWS = ["11111", "1P0C1", "10E01", "11111"]


def test_parse_map_with_trailing_newline():
    text = "\n".join(SAMPLE_ROWS) + "\n"
    assert parse_map(text) == SAMPLE_ROWS


def test_parse_map_without_trailing_newline():
    text = "\n".join(SAMPLE_ROWS)
    assert parse_map(text) == SAMPLE_ROWS


def test_parse_map_single_row():
    assert parse_map("111") == ["111"]


def test_parse_map_keeps_carriage_return():
    rows = parse_map("11\r\n11\r\n")
    assert rows == ["11\r", "11\r"]


def test_parse_map_rows_join_back_to_text():
    text = "\n".join(SAMPLE_ROWS) + "\n"
    assert "\n".join(parse_map(text)) + "\n" == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n",
        "\n111\n111",
        "111\n\n111",
        "111\n111\n\n",
    ],
)
def test_parse_map_rejects_empty_lines(text):
    with pytest.raises(MapFileError):
        parse_map(text)


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(SAMPLE_ROWS) + "\n", encoding="utf-8")
    assert read_map(path) == SAMPLE_ROWS


def test_read_map_accepts_string_path(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(SAMPLE_ROWS), encoding="utf-8")
    assert read_map(str(path)) == SAMPLE_ROWS


def test_read_map_keeps_windows_line_endings(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(b"11\r\n11\r\n")
    assert read_map(path) == ["11\r", "11\r"]


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        read_map(tmp_path / "missing.ber")


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MapFileError):
        read_map(path)


def test_read_map_blank_line_inside(tmp_path):
    path = tmp_path / "gap.ber"
    path.write_text("111\n\n111\n", encoding="utf-8")
    with pytest.raises(MapFileError):
        read_map(path)


def test_read_map_directory_is_error(tmp_path):
    with pytest.raises(MapFileError):
        read_map(tmp_path)