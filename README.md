# sysstatus

`sysstatus` builds a one-line system status string from a list of small
components and writes it to standard output again and again at a fixed
interval, once every second by default. The default line shows the network
receive and transmit speed, the battery charge and state, and the date and
time.

Most components read Linux `/proc` and `/sys` files, so the package is meant
for Linux.

## Installation

```
pip install .
```

## Command line

```
sysstatus [-s] [-1]
```

- The status line is always written to standard output, one line per update.
- `-s` is accepted and changes nothing.
- `-1` writes a single line and exits.

Any other flag, or any argument that is not a flag, prints a usage message
and exits with status 1.

`SIGINT` and `SIGTERM` end the loop after the current update. `SIGUSR1` cuts
the wait short and refreshes the line at once.

## Components

Each component returns a string. If it cannot find a value it returns
`None`, and the status line shows the "unknown" text (`n/a`) in its place.
Components that cannot read a file or call the system print a warning to
standard error.

| Module               | Functions                                                                 |
|----------------------|---------------------------------------------------------------------------|
| `sysstatus.power`    | `battery_perc`, `battery_state`, `battery_remaining`                      |
| `sysstatus.cpu`      | `cpu_freq`, `CpuUsage.perc`                                               |
| `sysstatus.disk`     | `disk_free`, `disk_perc`, `disk_total`, `disk_used`                       |
| `sysstatus.memory`   | `parse_meminfo`, `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `sysstatus.network`  | `ipv4`, `ipv6`, `NetSpeed.rx`, `NetSpeed.tx`, `wifi_perc`, `wifi_essid`   |
| `sysstatus.system`   | `datetime`, `entropy`, `hostname`, `kernel_release`, `load_avg`, `num_files`, `run_command`, `separator`, `temp`, `uptime`, `gid`, `uid`, `username`, `vol_perc` |

`CpuUsage` and `NetSpeed` compare each reading with the one before it, so
their first call returns `None`. `NetSpeed` takes the update interval in
milliseconds to turn byte counts into a rate.

`battery_state` returns `+` while charging, `-` while discharging, `#` when
full and `?` otherwise. `battery_remaining` returns `Hh Mm` while
discharging and an empty string otherwise.

Sizes are formatted with `sysstatus.util.fmt_human`, which takes base 1000
(`k`, `M`, `G`, …) or base 1024 (`Ki`, `Mi`, `Gi`, …) and raises
`ValueError` for any other base:

```python
from sysstatus.util import fmt_human

fmt_human(1500, 1000)   # '  1.5 k'
```

## Building your own status line

A status line is a list of `sysstatus.config.StatusArg` entries. Each entry
holds a component, a format string with a `%s` for its result (`%%` stands
for a literal `%`), and an optional argument for the component. An entry
without an argument calls its component with none. Pass the list to
`sysstatus.status.format_status`:

```python
from sysstatus.config import StatusArg
from sysstatus.status import format_status
from sysstatus import system

args = [
    StatusArg(system.load_avg, " [load: %s]"),
    StatusArg(system.datetime, " [%s]", "%F %T"),
]
print(format_status(args, "n/a", 2048))
```

`format_status` stops adding entries once the next one would not fit within
the given length in bytes.

`sysstatus.status.run(args, interval, once, write)` repeats this every
`interval` milliseconds and hands each line to `write`, which defaults to
printing on standard output.

`sysstatus.config.default_args` returns the default list. The settings
`INTERVAL` (1000 ms), `UNKNOWN_STR` (`n/a`) and `MAXLEN` (2048) live in
`sysstatus.config`.

## What it does not do

- It does not set a window title or the name of the desktop's root window;
  the status line only goes to standard output, or to the `write` function
  given to `run`.
- It has no keyboard layout or keyboard indicator component.
- The command always uses the default line from `default_args`; to show
  other components, build a list and call `run` from Python.