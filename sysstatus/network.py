"""Network figures: interface addresses, transfer speeds and wireless link."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from .util import fmt_human, read_text, warn

_NET_CLASS = "/sys/class/net"
_WIRELESS_PATH = "/proc/net/wireless"

_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_IWREQ_SIZE = 32
_SIOCGIWESSID = 0x8B1B

# Upper bound of the link quality column in the wireless statistics file.
_MAX_LINK_QUALITY = 70

_COUNTER_WRAP = 1 << 64


def _address(interface, family):
    for addr in psutil.net_if_addrs().get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface):
    """First IPv4 address of ``interface``."""
    return _address(interface, socket.AF_INET)


def ipv6(interface):
    """First IPv6 address of ``interface``."""
    return _address(interface, socket.AF_INET6)


class NetSpeed:
    """Receive and transmit rates from the interface byte counters.

    Each reading is compared with the previous one for the same interface;
    ``interval`` is the time between readings in milliseconds.
    """

    def __init__(self, interval=1000, base=_NET_CLASS):
        self.interval = interval
        self.base = base
        self._previous = {}

    def _rate(self, interface, counter):
        path = os.path.join(self.base, interface, "statistics", counter)
        text = read_text(path)
        if text is None:
            return None
        try:
            current = int(text.split()[0])
        except (IndexError, ValueError):
            return None
        key = (interface, counter)
        old = self._previous.get(key, 0)
        self._previous[key] = current
        if old == 0:
            return None
        delta = (current - old) % _COUNTER_WRAP
        return fmt_human(delta * 1000 // self.interval, 1024)

    def rx(self, interface):
        """Bytes received per second since the last call."""
        return self._rate(interface, "rx_bytes")

    def tx(self, interface):
        """Bytes transmitted per second since the last call."""
        return self._rate(interface, "tx_bytes")


def _is_up(operstate):
    head = operstate[:4]
    newline = head.find("\n")
    if newline >= 0:
        head = head[: newline + 1]
    return head == "up\n"


def wifi_perc(interface, base=_NET_CLASS):
    """Wireless link quality of ``interface`` in percent."""
    operstate = read_text(os.path.join(base, interface, "operstate"))
    if operstate is None or not _is_up(operstate):
        return None

    text = read_text(_WIRELESS_PATH)
    if text is None:
        return None
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]

    start = line.find(interface)
    if start < 0:
        return None
    fields = line[start + len(interface) + 2 :].split()
    if len(fields) < 2:
        return None
    match = re.match(r"[+-]?\d+", fields[1])
    if match is None:
        return None
    link = int(match.group())
    return str(int(link / _MAX_LINK_QUALITY * 100))


def wifi_essid(interface):
    """Name of the network ``interface`` is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, _IW_ESSID_MAX_SIZE + 1, 0)
    request = bytearray(request.ljust(_IWREQ_SIZE, b"\0"))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None

    result = essid.tobytes().split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return result or None