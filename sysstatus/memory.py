"""Memory and swap figures from the kernel's meminfo file."""

from __future__ import annotations

from .util import fmt_human, read_text

_MEMINFO = "/proc/meminfo"


def parse_meminfo(text):
    """Map each ``Name: value kB`` line to its integer value in kB."""
    fields = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path, *names):
    text = read_text(path)
    if text is None:
        return None
    info = parse_meminfo(text)
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(path=_MEMINFO):
    """Available memory."""
    values = _fields(path, "MemTotal", "MemFree", "MemAvailable")
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(path=_MEMINFO):
    """Used memory in percent, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return "% -3d" % (100 * ((total - free) - (buffers + cached)) // total)


def ram_total(path=_MEMINFO):
    """Total memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(path=_MEMINFO):
    """Used memory, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(path=_MEMINFO):
    """Free swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(path=_MEMINFO):
    """Used swap in percent, not counting swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return "% -3d" % (100 * (total - free - cached) // total)


def swap_total(path=_MEMINFO):
    """Total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(path=_MEMINFO):
    """Used swap, not counting swap cache."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)