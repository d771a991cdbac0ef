"""Facts about the host machine: CPUs, caches, clock rate, load and name."""

from __future__ import annotations

import functools
import os
import re
import socket
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from benchcore.string_util import stod, stoi, stoul

_SYS_CPU_DIR = Path("/sys/devices/system/cpu")
_PROC_CPUINFO = Path("/proc/cpuinfo")
_PROCESSOR_KEY = "processor"
_ERROR_VALUE = -1.0
_MAX_LOAD_SAMPLES = 3
_ESTIMATE_SECONDS = 1.0
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class Scaling(Enum):
    """Whether the CPU frequency governor may change the clock rate."""

    UNKNOWN = "unknown"
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class CacheInfo:
    """One CPU cache as seen from the first processor."""

    type: str
    level: int
    size: int
    num_sharing: int


def _is_linux() -> bool:
    return sys.platform.startswith(("linux", "cygwin"))


def _read_token(path: Path) -> str | None:
    """Return the first whitespace separated token of a file, or None."""
    try:
        text = path.read_text()
    except OSError:
        return None
    tokens = text.split()
    return tokens[0] if tokens else None


def _read_int(path: Path) -> int | None:
    token = _read_token(path)
    if token is None:
        return None
    found = _INTEGER.match(token)
    return int(found.group(1)) if found else None


def count_set_bits_in_cpu_map(value: str) -> int:
    """Count the CPUs named in a comma separated hexadecimal CPU mask."""
    *parts, last = value.split(",")
    if last:
        parts.append(last)
    return sum(stoul("0x" + part, 16)[0].bit_count() for part in parts)


def _cpu_scaling_in(cpu_dir: Path, num_cpus: int) -> Scaling:
    if num_cpus <= 0:
        return Scaling.UNKNOWN
    for cpu in range(num_cpus):
        governor = _read_token(cpu_dir / f"cpu{cpu}" / "cpufreq" / "scaling_governor")
        if governor is not None and governor != "performance":
            return Scaling.ENABLED
    return Scaling.DISABLED


def cpu_scaling(num_cpus: int) -> Scaling:
    """Report whether frequency scaling is in effect on any of *num_cpus* CPUs."""
    if num_cpus <= 0 or sys.platform == "win32":
        return Scaling.UNKNOWN
    # Missing cpufreq files mean we are probably not on Linux; they are ignored.
    return _cpu_scaling_in(_SYS_CPU_DIR, num_cpus)


def _parse_cache_size(text: str, size_path: Path) -> int:
    found = _INTEGER.match(text)
    if found is None:
        raise ValueError(f"Failed while reading file '{size_path}'")
    size = int(found.group(1))
    rest = text[found.end():].split()
    suffix = rest[0] if rest else ""
    if suffix and suffix != "K":
        raise ValueError(f"Invalid cache size format: Expected bytes {suffix}")
    if suffix == "K":
        size *= 1024
    return size


def _cache_sizes_in(cache_dir: Path) -> list[CacheInfo]:
    caches = []
    index = 0
    while True:
        entry = cache_dir / f"index{index}"
        index += 1
        size_path = entry / "size"
        try:
            size_text = size_path.read_text()
        except OSError:
            break
        size = _parse_cache_size(size_text, size_path)
        cache_type = _read_token(entry / "type")
        if cache_type is None:
            raise OSError(f"Failed to read from file {entry / 'type'}")
        level = _read_int(entry / "level")
        if level is None:
            raise OSError(f"Failed to read from file {entry / 'level'}")
        cpu_map = _read_token(entry / "shared_cpu_map")
        if cpu_map is None:
            raise OSError(f"Failed to read from file {entry / 'shared_cpu_map'}")
        caches.append(
            CacheInfo(
                type=cache_type,
                level=level,
                size=size,
                num_sharing=count_set_bits_in_cpu_map(cpu_map),
            )
        )
    return caches


def get_cache_sizes() -> list[CacheInfo]:
    """Return the caches of the first CPU as exported through sysfs.

    Systems without that interface report no caches.
    """
    return _cache_sizes_in(_SYS_CPU_DIR / "cpu0" / "cache")


def _split_value(line: str) -> str:
    _, sep, value = line.partition(":")
    return value if sep else ""


def _num_cpus_from_cpuinfo(lines: Iterable[str]) -> int:
    num_cpus = 0
    max_id = -1
    for line in lines:
        line = line.rstrip("\n")
        if not line:
            continue
        value = _split_value(line)
        if line.startswith(_PROCESSOR_KEY):
            num_cpus += 1
            if value:
                max_id = max(stoi(value)[0], max_id)
    if max_id + 1 != num_cpus:
        print(
            "CPU ID assignments in /proc/cpuinfo seem messed up."
            " This is usually caused by a bad BIOS.",
            file=sys.stderr,
        )
    return num_cpus


def get_num_cpus() -> int:
    """Return the number of logical CPUs, or -1 when it cannot be found."""
    if not _is_linux():
        count = os.cpu_count()
        return count if count is not None else -1
    try:
        with _PROC_CPUINFO.open() as cpuinfo:
            return _num_cpus_from_cpuinfo(cpuinfo)
    except OSError:
        print("failed to open /proc/cpuinfo", file=sys.stderr)
        return -1


def _cycles_from_sysfs(cpu0_dir: Path, scaling: Scaling) -> float | None:
    # The kHz figure is preferred in this order: the exported TSC frequency,
    # the current frequency when scaling is off, then the maximum frequency.
    candidates = [cpu0_dir / "tsc_freq_khz"]
    if scaling is Scaling.DISABLED:
        candidates.append(cpu0_dir / "cpufreq" / "scaling_cur_freq")
    candidates.append(cpu0_dir / "cpufreq" / "cpuinfo_max_freq")
    for path in candidates:
        freq = _read_int(path)
        if freq is not None:
            return freq * 1000.0
    return None


def _cycles_from_cpuinfo(lines: Iterable[str]) -> float:
    """Return cycles per second from cpuinfo lines, or -1.0 if none is given."""
    bogo_clock = _ERROR_VALUE
    for line in lines:
        line = line.rstrip("\n")
        if not line:
            continue
        value = _split_value(line)
        lowered = line.lower()
        # Only positive values are accepted; some virtual machines report zero.
        if lowered.startswith("cpu mhz"):
            if value:
                cycles = stod(value)[0] * 1000000.0
                if cycles > 0:
                    return cycles
        elif lowered.startswith("bogomips"):
            if value:
                bogo_clock = stod(value)[0] * 1000000.0
                if bogo_clock < 0.0:
                    bogo_clock = _ERROR_VALUE
    return bogo_clock


def _cycles_from_registry() -> float | None:
    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE,
            "HARDWARE\\DESCRIPTION\\System\\CentralProcessor\\0",
        ) as key:
            mhz, _ = winreg.QueryValueEx(key, "~MHz")
    except OSError:
        return None
    return float(int(mhz) * 1000 * 1000)


def _estimate_cycles() -> float:
    start = time.perf_counter_ns()
    time.sleep(_ESTIMATE_SECONDS)
    return float(time.perf_counter_ns() - start)


def get_cpu_cycles_per_second(scaling: Scaling) -> float:
    """Return the CPU clock rate in cycles per second.

    On Linux, -1.0 is returned when /proc/cpuinfo cannot be read. When no
    figure is available a rough estimate is measured over one second.
    """
    if _is_linux():
        cycles = _cycles_from_sysfs(_SYS_CPU_DIR / "cpu0", scaling)
        if cycles is not None:
            return cycles
        try:
            with _PROC_CPUINFO.open() as cpuinfo:
                bogo_clock = _cycles_from_cpuinfo(cpuinfo)
        except OSError:
            print("failed to open /proc/cpuinfo", file=sys.stderr)
            return _ERROR_VALUE
        if bogo_clock >= 0.0:
            return bogo_clock
    elif sys.platform == "win32":
        cycles = _cycles_from_registry()
        if cycles is not None:
            return cycles
    return _estimate_cycles()


def get_load_avg() -> list[float]:
    """Return up to three system load averages; empty where unsupported."""
    try:
        samples = os.getloadavg()
    except (AttributeError, OSError):
        return []
    return list(samples[:_MAX_LOAD_SAMPLES])


def get_system_name() -> str:
    """Return the host name, or an empty string if it cannot be found."""
    try:
        return socket.gethostname()
    except OSError:
        return ""


@dataclass(frozen=True)
class CPUInfo:
    """CPU facts gathered once per process."""

    num_cpus: int
    scaling: Scaling
    cycles_per_second: float
    caches: tuple[CacheInfo, ...]
    load_avg: tuple[float, ...]

    @classmethod
    @functools.cache
    def get(cls) -> CPUInfo:
        """Return the shared instance, gathering the facts on first use."""
        num_cpus = get_num_cpus()
        scaling = cpu_scaling(num_cpus)
        return cls(
            num_cpus=num_cpus,
            scaling=scaling,
            cycles_per_second=get_cpu_cycles_per_second(scaling),
            caches=tuple(get_cache_sizes()),
            load_avg=tuple(get_load_avg()),
        )


@dataclass(frozen=True)
class SystemInfo:
    """Facts about the host system gathered once per process."""

    name: str

    @classmethod
    @functools.cache
    def get(cls) -> SystemInfo:
        """Return the shared instance, gathering the facts on first use."""
        return cls(name=get_system_name())