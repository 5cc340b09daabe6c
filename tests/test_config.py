import pytest

from pickmenu.config import (
    DEFAULT_FONT,
    MIN_LINE_HEIGHT,
    UsageError,
    parse_args,
)


def test_defaults():
    options = parse_args([])
    assert options.lines == 20
    assert options.centered is True
    assert options.topbar is False
    assert options.min_width == 500
    assert options.font == DEFAULT_FONT
    assert options.colors["norm"] == ("#c8c8c3", "#0A0A0A")


def test_value_options():
    options = parse_args(["-l", "5", "-p", "run:", "-fn", "mono:size=9",
                          "-m", "1", "-bw", "3", "-w", "300"])
    assert options.lines == 5
    assert options.prompt == "run:"
    assert options.font == "mono:size=9"
    assert options.monitor == 1
    assert options.border_width == 3
    assert options.width == 300


def test_switches():
    options = parse_args(["-b", "-f", "-c", "-i"])
    assert options.topbar is False
    assert options.fast is True
    assert options.centered is True
    assert options.case_insensitive is True


def test_colors():
    options = parse_args(["-nb", "#111111", "-nf", "#222222",
                          "-sb", "#333333", "-sf", "#444444"])
    assert options.colors["norm"] == ("#222222", "#111111")
    assert options.colors["sel"] == ("#444444", "#333333")
    assert options.colors["out"] == ("#0A0A0A", "#f8f8f2")


def test_line_height_has_minimum():
    assert parse_args(["-h", "3"]).line_height == MIN_LINE_HEIGHT
    assert parse_args(["-h", "30"]).line_height == 30


def test_integer_parsing_is_lenient():
    assert parse_args(["-l", "12abc"]).lines == 12
    assert parse_args(["-x", "abc"]).x == 0
    assert parse_args(["-y", "-7"]).y == -7


def test_version_stops_parsing():
    options = parse_args(["-v", "-unknown"])
    assert options.show_version is True


def test_missing_value_is_usage_error():
    with pytest.raises(UsageError):
        parse_args(["-l"])


def test_unknown_option_is_usage_error():
    with pytest.raises(UsageError) as info:
        parse_args(["-zz", "value"])
    assert str(info.value).startswith("usage:")


def test_defaults_are_not_shared():
    first = parse_args(["-nb", "#123456"])
    second = parse_args([])
    assert second.colors["norm"] != first.colors["norm"]
    assert first.colors["norm"][1] == "#123456"