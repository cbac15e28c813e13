"""Build the status line and refresh it periodically."""

from __future__ import annotations

import signal
import sys
import threading
import time

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, default_args
from .util import parse_flags, warn


def format_status(args, unknown, maxlen):
    """Concatenate the rendered items, stopping before the line would overflow."""
    parts = []
    used = 0
    for item in args:
        piece = item.render(unknown)
        size = len(piece.encode("utf-8"))
        if size >= maxlen - used:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        used += size
    return "".join(parts)


def _write_stdout(status):
    try:
        sys.stdout.write(status + "\n")
        sys.stdout.flush()
    except OSError as exc:
        warn(f"puts: {exc.strerror or exc}")
        raise SystemExit(1) from exc


def run(args, interval=INTERVAL, once=False, write=None):
    """Write the status line every ``interval`` milliseconds until terminated.

    SIGINT and SIGTERM end the loop after the current update; SIGUSR1
    triggers an immediate update.
    """
    if write is None:
        write = _write_stdout
    done = threading.Event()
    wake = threading.Event()

    def terminate(signo, _frame):
        if signo != signal.SIGUSR1:
            done.set()
        wake.set()

    previous = {}
    if threading.current_thread() is threading.main_thread():
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            previous[signo] = signal.signal(signo, terminate)

    try:
        while True:
            start = time.monotonic()
            write(format_status(args, UNKNOWN_STR, MAXLEN))
            if once or done.is_set():
                break
            remaining = interval / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                wake.wait(remaining)
                wake.clear()
            if done.is_set():
                break
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def _usage():
    warn("usage: sysstatus [-s] [-1]")
    return 1


def main(argv=None):
    """Command entry point: ``-s`` writes to standard output, ``-1`` updates once."""
    if argv is None:
        argv = sys.argv[1:]
    flags, operands = parse_flags(argv)
    once = False
    for flag in flags:
        if flag == "1":
            once = True
        elif flag != "s":
            return _usage()
    if operands:
        return _usage()

    run(default_args(INTERVAL), INTERVAL, once, _write_stdout)
    return 0