"""Shared helpers: human-readable sizes, warnings, file reading, flag parsing."""

from __future__ import annotations

import os
import sys

_PREFIX_1000 = ("", "k", "M", "G", "T", "P", "E", "Z", "Y")
_PREFIX_1024 = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")


def fmt_human(num, base):
    """Scale ``num`` by ``base`` (1000 or 1024) and append the unit prefix."""
    if base == 1000:
        prefixes = _PREFIX_1000
    elif base == 1024:
        prefixes = _PREFIX_1024
    else:
        raise ValueError(f"fmt_human: invalid base {base!r}")

    scaled = float(num)
    index = 0
    while index < len(prefixes) and scaled >= base:
        scaled /= base
        index += 1
    # Past the largest prefix the last one is kept.
    index = min(index, len(prefixes) - 1)
    return "%5.1f %s" % (scaled, prefixes[index])


def warn(message):
    """Write a warning to standard error, prefixed with the program name."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    prefix = f"{prog}: " if prog and not message.startswith("usage") else ""
    print(prefix + message, file=sys.stderr)


def read_text(path):
    """Return the contents of ``path``, or None after warning if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def parse_flags(argv):
    """Split arguments (without the program name) into flag letters and operands.

    Arguments of the form ``-abc`` contribute each letter as a flag; ``--``
    ends the flags, as does the first argument not starting with ``-`` or a
    lone ``-``.
    """
    args = list(argv)
    flags = []
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            index += 1
            break
        if len(arg) < 2 or not arg.startswith("-"):
            break
        flags.extend(arg[1:])
        index += 1
    return flags, args[index:]