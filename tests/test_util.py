import pytest

from sysstatus.util import fmt_human, parse_flags, read_text, warn


def test_fmt_human_base_1000_kilo():
    assert fmt_human(1000, 1000) == "  1.0 k"


def test_fmt_human_small_number_base_1000_has_no_prefix():
    result = fmt_human(999, 1000)
    assert float(result) == 999.0


def test_fmt_human_base_1024_smallest_prefix():
    assert fmt_human(0, 1024) == "  0.0 Ki"


@pytest.mark.parametrize(
    "power,prefix", [(1, "k"), (2, "M"), (3, "G"), (4, "T"), (5, "P"), (6, "E"), (7, "Z"), (8, "Y")]
)
def test_fmt_human_base_1000_prefixes(power, prefix):
    result = fmt_human(1000**power, 1000)
    assert result.endswith(" " + prefix)
    assert float(result[: -len(prefix) - 1]) == 1.0


@pytest.mark.parametrize("value", [0, 1, 512, 1023, 2048, 10**9])
def test_fmt_human_base_1024_number_is_below_base(value):
    number, prefix = fmt_human(value, 1024).split()
    assert float(number) < 1024
    assert prefix.endswith("i")


def test_fmt_human_number_field_width():
    assert len(fmt_human(5, 1000).split(" ")[-2]) >= 1
    assert fmt_human(5, 1000).index("5") == 2


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_warn_writes_message(capsys):
    warn("something failed")
    assert "something failed" in capsys.readouterr().err


def test_warn_usage_has_no_prefix(capsys):
    warn("usage: prog [-s]")
    assert capsys.readouterr().err.startswith("usage: prog [-s]")


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "value"
    path.write_text("42\n")
    assert read_text(path) == "42\n"


def test_read_text_missing_returns_none(tmp_path, capsys):
    assert read_text(tmp_path / "missing") is None
    assert "fopen" in capsys.readouterr().err


def test_parse_flags_separate():
    assert parse_flags(["-s", "-1"]) == (["s", "1"], [])


def test_parse_flags_combined():
    assert parse_flags(["-s1", "rest"]) == (["s", "1"], ["rest"])


def test_parse_flags_double_dash_stops():
    assert parse_flags(["-s", "--", "-1"]) == (["s"], ["-1"])


def test_parse_flags_lone_dash_is_operand():
    assert parse_flags(["-", "-s"]) == ([], ["-", "-s"])


def test_parse_flags_empty():
    assert parse_flags([]) == ([], [])