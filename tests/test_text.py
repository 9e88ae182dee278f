from treepeek.render.text import escape_control, format_point, split_lines, truncate


def test_escape_control_replaces_newlines_and_tabs():
    assert escape_control("a\nb\tc") == "a\\nb\\tc"
    assert "\n" not in escape_control("\n\n") and "\t" not in escape_control("\t")


def test_truncate_keeps_short_text():
    assert truncate("x" * 50, 50) == "x" * 50


def test_truncate_sixty_characters():
    out = truncate("y" * 60, 50)
    assert out == "y" * 47 + "..."
    assert len(out) == 50


def test_truncate_counts_characters_not_bytes():
    out = truncate("é" * 60, 50)
    assert out == "é" * 47 + "..."
    out.encode("utf8")


def test_split_lines_like_a_scanner():
    assert split_lines("") == []
    assert split_lines("one") == ["one"]
    assert split_lines("one\ntwo\n") == ["one", "two"]
    assert split_lines("one\r\ntwo") == ["one", "two"]
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_format_point_is_one_based_row():
    assert format_point((0, 8)) == "1:8"
    assert format_point((4, 0)) == "5:0"
