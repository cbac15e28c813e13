"""Processor frequency and utilisation."""

from __future__ import annotations

from .util import fmt_human, read_text

_FREQ_PATH = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
_STAT_PATH = "/proc/stat"


def cpu_freq(path=_FREQ_PATH):
    """Current frequency of the first CPU, read in kHz."""
    text = read_text(path)
    if text is None:
        return None
    try:
        freq = int(text.split()[0])
    except (IndexError, ValueError):
        return None
    return fmt_human(freq * 1000, 1000)


class CpuUsage:
    """CPU utilisation between successive readings of the kernel counters."""

    def __init__(self, path=_STAT_PATH):
        self.path = path
        self._previous = [0.0] * 7

    def _read(self):
        text = read_text(self.path)
        if text is None:
            return None
        # cpu user nice system idle iowait irq softirq
        fields = text.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return [float(field) for field in fields]
        except ValueError:
            return None

    def perc(self):
        """Busy percentage since the last call, or None on the first call."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy_indices = (0, 1, 2, 5, 6)
        busy = sum(current[i] for i in busy_indices) - sum(previous[i] for i in busy_indices)
        return "% -3d" % int(100 * busy / total)