import pytest

from sysstatus.power import battery_perc, battery_remaining, battery_state


def _battery(tmp_path, name="BAT0", **files):
    directory = tmp_path / name
    directory.mkdir()
    for key, value in files.items():
        (directory / key).write_text(value)
    return str(tmp_path)


def test_perc_reads_capacity(tmp_path):
    base = _battery(tmp_path, capacity="50\n")
    result = battery_perc("BAT0", base)
    assert result.strip() == "50"
    assert result.startswith(" ")


def test_perc_missing_battery(tmp_path):
    assert battery_perc("BAT9", str(tmp_path)) is None


def test_perc_garbage(tmp_path):
    base = _battery(tmp_path, capacity="full\n")
    assert battery_perc("BAT0", base) is None


@pytest.mark.parametrize(
    "status, symbol",
    [("Charging", "+"), ("Discharging", "-"), ("Full", "#"), ("Unknown", "?")],
)
def test_state_symbols(tmp_path, status, symbol):
    base = _battery(tmp_path, status=status + "\n")
    assert battery_state("BAT0", base) == symbol


def test_state_missing(tmp_path):
    assert battery_state("BAT0", str(tmp_path)) is None


def test_state_empty_file(tmp_path):
    base = _battery(tmp_path, status="")
    assert battery_state("BAT0", base) is None


def test_remaining_not_discharging_is_empty(tmp_path):
    base = _battery(tmp_path, status="Charging\n", charge_now="3000\n")
    assert battery_remaining("BAT0", base) == ""


def test_remaining_discharging_whole_hours(tmp_path):
    base = _battery(
        tmp_path, status="Discharging\n", charge_now="3000\n", current_now="1000\n"
    )
    assert battery_remaining("BAT0", base) == "3h 0m"


def test_remaining_uses_energy_and_power(tmp_path):
    base = _battery(
        tmp_path, status="Discharging\n", energy_now="3000\n", power_now="1000\n"
    )
    assert battery_remaining("BAT0", base) == "3h 0m"


def test_remaining_format_shape(tmp_path):
    base = _battery(
        tmp_path, status="Discharging\n", charge_now="1234\n", current_now="567\n"
    )
    result = battery_remaining("BAT0", base)
    hours, minutes = result.split()
    assert hours.endswith("h") and minutes.endswith("m")
    assert 0 <= int(minutes[:-1]) < 60


def test_remaining_zero_current(tmp_path):
    base = _battery(
        tmp_path, status="Discharging\n", charge_now="3000\n", current_now="0\n"
    )
    assert battery_remaining("BAT0", base) is None


def test_remaining_no_charge_file(tmp_path):
    base = _battery(tmp_path, status="Discharging\n")
    assert battery_remaining("BAT0", base) is None


def test_remaining_no_current_file(tmp_path):
    base = _battery(tmp_path, status="Discharging\n", charge_now="3000\n")
    assert battery_remaining("BAT0", base) is None