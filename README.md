# benchcore

Building blocks for benchmark harnesses: summary statistics over repeated
measurements, facts about the host machine, regular expressions for picking
benchmarks by name, and compact human-readable number formatting.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the test tools as well:

```
pip install ".[test]"
```

## Statistics (`benchcore.stats`)

```python
from benchcore.stats import statistics_mean, statistics_median, statistics_stddev

samples = [2.5, 2.4, 3.3, 4.2, 5.1]
statistics_mean(samples)     # 3.5
statistics_median(samples)   # 3.3
statistics_stddev(samples)   # sample standard deviation, about 1.1511
```

An empty sequence has a mean, median and standard deviation of `0.0`. With
fewer than three samples the median is the mean. A single sample has a
standard deviation of `0.0`.

## System information (`benchcore.sysinfo`)

```python
from benchcore.sysinfo import CPUInfo, SystemInfo

cpu = CPUInfo.get()
print(cpu.num_cpus, cpu.cycles_per_second, cpu.scaling)
for cache in cpu.caches:
    print(cache.level, cache.type, cache.size, cache.num_sharing)
print(cpu.load_avg)

print(SystemInfo.get().name)
```

`CPUInfo.get()` and `SystemInfo.get()` gather their data on the first call and
return the same frozen object on every later call.

- `num_cpus` comes from `/proc/cpuinfo` on Linux and from `os.cpu_count()`
  elsewhere; `-1` means it could not be found.
- `scaling` is a `Scaling` member (`UNKNOWN`, `ENABLED`, `DISABLED`), read from
  the cpufreq governors in sysfs. Any governor other than `performance` counts
  as `ENABLED`.
- `cycles_per_second` is read from sysfs or `/proc/cpuinfo` on Linux and from
  the registry on Windows. Where no figure is available it is estimated by
  sleeping for one second, so the first call to `CPUInfo.get()` can take that
  long.
- `caches` is a tuple of `CacheInfo` records for the first CPU, read from
  sysfs; it is empty where that interface does not exist.
- `load_avg` holds up to three load averages, or is empty where the platform
  has none.

The individual functions are available too: `get_num_cpus()`,
`cpu_scaling(num_cpus)`, `get_cpu_cycles_per_second(scaling)`,
`get_cache_sizes()`, `get_load_avg()`, `get_system_name()` and
`count_set_bits_in_cpu_map(value)`, which counts the CPUs in a comma-separated
hexadecimal mask such as `"ff,00000001"`.

## Regular expressions (`benchcore.regex`)

`Regex` compiles a pattern at construction, raising `RegexError` (a
`ValueError`) on a bad pattern. `match` looks for the pattern anywhere in the
text. POSIX bracket classes such as `[[:digit:]]` are understood.

```python
from benchcore.regex import Regex

Regex("BM_Match1/(64|80)").match("BM_Match1/64")   # True
Regex("BM_Match1/(64|80)").match("BM_Match1/10")   # False
```

## String helpers (`benchcore.string_util`)

```python
from benchcore.string_util import (
    append_human_readable,
    human_readable_number,
    stod,
    stoi,
    stoul,
    str_cat,
    str_format,
    str_split,
)

human_readable_number(1_000_000, 1000)    # "1000k"
human_readable_number(1024 * 1024, 1024)  # "1024k"
append_human_readable(5, "size=")         # "size=5"
str_format("%s/%d", "BM_Match1", 64)      # "BM_Match1/64"
str_cat("threads:", 8)                    # "threads:8"
str_split("hello,there,is,more", ",")     # ["hello", "there", "is", "more"]
str_split("", ",")                        # []

stoul("BEEF", 16)   # (48879, 4): the value and the characters consumed
stoi("-17")         # (-17, 3)
stod("1.5")         # (1.5, 3)
```

`stoul`, `stoi` and `stod` skip leading white space and parse as much of the
text as they can. They raise `ValueError` when no number is found and
`OverflowError` when the number is out of range (unsigned 64-bit for `stoul`,
signed 32-bit for `stoi`, a double for `stod`).

## What the package does not do

There is no benchmark runner, no command-line program and no report output.
The package also has no timers of its own; measure with the standard library's
`time` module and hand the samples to `benchcore.stats`.