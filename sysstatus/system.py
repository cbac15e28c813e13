"""Miscellaneous system figures: time, host, load, users, files, commands."""

from __future__ import annotations

import fcntl
import os
import pwd
import socket
import struct
import subprocess
import sys
import time

from .util import read_text, warn

_BUF_SIZE = 1024
_ENTROPY_PATH = "/proc/sys/kernel/random/entropy_avail"

# OSS mixer ioctls: _IOR('M', n, int).
_SOUND_MIXER_READ_DEVMASK = 0x80044DFE
_MIXER_READ_BASE = 0x80044D00
_SOUND_MIXER_VOLUME = 0  # index of "vol" among the mixer device names


def datetime(fmt):
    """The local time formatted with strftime-style ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= _BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(path=_ENTROPY_PATH):
    """Available kernel entropy."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    text = read_text(path)
    if text is None:
        return None
    try:
        return str(int(text.split()[0]))
    except (IndexError, ValueError):
        return None


def hostname():
    """The host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostbyname: {exc.strerror or exc}")
        return None


def kernel_release():
    """The kernel release, as printed by ``uname -r``."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg():
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path):
    """Number of entries in directory ``path``."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(count)


def run_command(cmd):
    """The first line of output of shell command ``cmd``, or None if empty."""
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    output = completed.stdout.decode("utf-8", errors="replace")
    if not output:
        return None
    line = output.splitlines(keepends=True)[0][: _BUF_SIZE - 2]
    line = line.rstrip("\n") if line.endswith("\n") else line
    return line or None


def separator(text):
    """Return ``text`` unchanged."""
    return text


def temp(file):
    """Temperature in degrees Celsius from a millidegree sensor file."""
    text = read_text(file)
    if text is None:
        return None
    try:
        value = int(text.split()[0])
    except (IndexError, ValueError):
        return None
    return str(int(value / 1000))


def uptime():
    """Time since boot as ``Hh Mm``."""
    clock = getattr(time, "CLOCK_BOOTTIME", None)
    if clock is None:
        clock = getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def gid():
    """Group id of the current user."""
    return str(os.getgid())


def username():
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def uid():
    """Effective user id."""
    return str(os.geteuid())


def _ioctl_int(fd, request):
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card):
    """Master volume in percent from an OSS mixer device such as ``/dev/mixer``."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None
        if not devmask & (1 << _SOUND_MIXER_VOLUME):
            return None
        try:
            value = _ioctl_int(fd, _MIXER_READ_BASE | _SOUND_MIXER_VOLUME)
        except OSError as exc:
            warn(f"ioctl 'MIXER_READ({_SOUND_MIXER_VOLUME})': {exc.strerror or exc}")
            return None
    finally:
        os.close(fd)
    return str(value & 0xFF)