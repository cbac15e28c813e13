"""Battery charge, charging state and remaining time from the power-supply class."""

from __future__ import annotations

import os

from .util import read_text

_POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "#",
}


def _first_token(path, limit=None):
    text = read_text(path)
    if text is None:
        return None
    parts = text.split()
    if not parts:
        return None
    token = parts[0]
    return token[:limit] if limit else token


def _read_int(path):
    token = _first_token(path)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _pick(directory, *names):
    """Return the first of ``names`` inside ``directory`` that is readable."""
    for name in names:
        path = os.path.join(directory, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat, base=_POWER_SUPPLY):
    """Charge of battery ``bat`` in percent."""
    perc = _read_int(os.path.join(base, bat, "capacity"))
    if perc is None:
        return None
    return "% -3d" % perc


def battery_state(bat, base=_POWER_SUPPLY):
    """A symbol for the charging state: ``+``, ``-``, ``#`` or ``?``."""
    state = _first_token(os.path.join(base, bat, "status"), 12)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat, base=_POWER_SUPPLY):
    """Time left while discharging as ``Hh Mm``; empty when not discharging."""
    directory = os.path.join(base, bat)
    state = _first_token(os.path.join(directory, "status"), 12)
    if state is None:
        return None

    charge_path = _pick(directory, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(directory, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = _read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"