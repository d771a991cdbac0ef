import math

import pytest

from benchcore.string_util import (
    append_human_readable,
    human_readable_number,
    stod,
    stoi,
    stoul,
    str_cat,
    str_format,
    str_split,
)


@pytest.mark.parametrize(
    "text, base, value, pos",
    [
        ("0", 10, 0, 1),
        ("7", 10, 7, 1),
        ("135", 10, 135, 3),
        ("18446744073709551615", 10, 0xFFFFFFFFFFFFFFFF, 20),
        ("1010", 2, 10, 4),
        ("1010", 8, 520, 4),
        ("1010", 10, 1010, 4),
        ("1010", 16, 4112, 4),
        ("BEEF", 16, 0xBEEF, 4),
    ],
)
def test_stoul(text, base, value, pos):
    assert stoul(text, base) == (value, pos)


def test_stoul_invalid():
    with pytest.raises(ValueError):
        stoul("this is a test")


def test_stoul_out_of_range():
    with pytest.raises(OverflowError):
        stoul("18446744073709551616")


def test_stoul_hex_prefix_consumed():
    value, pos = stoul("0x" + "ff", 16)
    assert value == int("ff", 16)
    assert pos == len("0xff")


@pytest.mark.parametrize(
    "text, base, value, pos",
    [
        ("0", 10, 0, 1),
        ("-17", 10, -17, 3),
        ("1357", 10, 1357, 4),
        ("1010", 2, 10, 4),
        ("1010", 8, 520, 4),
        ("1010", 10, 1010, 4),
        ("1010", 16, 4112, 4),
        ("BEEF", 16, 0xBEEF, 4),
    ],
)
def test_stoi(text, base, value, pos):
    assert stoi(text, base) == (value, pos)


def test_stoi_invalid():
    with pytest.raises(ValueError):
        stoi("this is a test")


def test_stoi_out_of_int_range():
    with pytest.raises(OverflowError):
        stoi("2147483648")


def test_stoi_stops_at_non_digit():
    assert stoi(" 42 rest") == (42, 3)


@pytest.mark.parametrize(
    "text, value, pos",
    [
        ("0", 0.0, 1),
        ("-84", -84.0, 3),
        ("1234", 1234.0, 4),
        ("1.5", 1.5, 3),
        ("-1.25e+9", -1.25e9, 8),
    ],
)
def test_stod(text, value, pos):
    assert stod(text) == (value, pos)


def test_stod_invalid():
    with pytest.raises(ValueError):
        stod("this is a test")


def test_stod_overflow():
    with pytest.raises(OverflowError):
        stod("1e999")


def test_stod_infinity_and_nan():
    value, pos = stod("-inf")
    assert value == -math.inf
    assert pos == len("-inf")
    nan_value, _ = stod("nan")
    assert math.isnan(nan_value)


def test_stod_leading_space_and_trailing_text():
    value, pos = stod("  2.5 MHz")
    assert value == 2.5
    assert pos == len("  2.5")


def test_str_split():
    assert str_split("", ",") == []
    assert str_split("hello", ",") == ["hello"]
    assert str_split("hello,there,is,more", ",") == ["hello", "there", "is", "more"]


def test_str_split_round_trip():
    parts = ["a", "", "b", "c"]
    assert str_split(",".join(parts), ",") == parts


def test_str_format():
    assert str_format("BM_Match1/%d", 3) == "BM_Match1/3"
    assert str_format("%s,%s", "BM_Match1/64", "BM_Match1/80") == "BM_Match1/64,BM_Match1/80"


def test_str_cat_joins_stream_renderings():
    assert str_cat("/sys/devices/system/cpu/cpu", 3, "/cpufreq") == (
        "/sys/devices/system/cpu/cpu3/cpufreq"
    )
    assert str_cat("index", 0, "/") == "index0/"


@pytest.mark.parametrize(
    "value, one_k, expected",
    [
        (1000 * 1000, 1000.0, "1000k"),
        (1000 * 1000, 1024.0, "976.562k"),
        (1024 * 1024, 1000.0, "1048.58k"),
        (1024 * 1024, 1024.0, "1024k"),
    ],
)
def test_human_readable_number(value, one_k, expected):
    assert human_readable_number(value, one_k) == expected


def test_human_readable_default_base_matches_1024():
    assert human_readable_number(1024 * 1024) == human_readable_number(1024 * 1024, 1024.0)


def test_human_readable_plain_values_unchanged():
    assert human_readable_number(5) == "5"
    assert human_readable_number(0.5) == "0.5"
    assert human_readable_number(0) == "0"


def test_human_readable_negative_mirrors_positive():
    assert human_readable_number(-1000 * 1000, 1000.0) == "-" + human_readable_number(
        1000 * 1000, 1000.0
    )


def test_append_human_readable_prefixes_text():
    bare = append_human_readable(1024 * 1024)
    assert append_human_readable(1024 * 1024, "size=") == "size=" + bare
    assert append_human_readable(7, "n=") == "n=7"