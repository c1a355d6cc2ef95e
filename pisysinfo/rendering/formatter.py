"""Text formatting for each display field.

Every function returns text already cut to the field budget, so a huge
input can only shorten its own field, never spill into its neighbours.
"""

from __future__ import annotations

from pisysinfo.data.readers import ClockReading
from pisysinfo.rendering.frame_data import fit_field

BYTES_PER_MB = 1024 * 1024
WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def weekday_abbrev(index: int) -> str:
    """Three-letter weekday for 0=Sunday..6=Saturday."""
    if not 0 <= index < len(WEEKDAYS):
        raise ValueError(f"Weekday index must be 0-6, got {index}")
    return WEEKDAYS[index]


def format_uptime(seconds: int) -> str:
    return fit_field(f"Up {seconds // 60} min")


def format_cpu_load(raw_load: int) -> str:
    # Kernel fixed-point load / 1000, shown as a percentage like the C tool did.
    return fit_field(f"CPU {raw_load // 1000}%")


def memory_usage(total_bytes: int, free_bytes: int) -> tuple[int, int, int]:
    """Return (used MB, free MB, percent used) from byte totals."""
    total_mb = total_bytes // BYTES_PER_MB
    free_mb = min(free_bytes // BYTES_PER_MB, total_mb)
    used_mb = total_mb - free_mb
    percent = used_mb * 100 // total_mb if total_mb > 0 else 0
    return used_mb, free_mb, percent


def format_memory(total_bytes: int, free_bytes: int) -> str:
    used_mb, _, percent = memory_usage(total_bytes, free_bytes)
    return fit_field(f"RAM {used_mb:03d}M {percent:02d}")


def format_temperature(celsius: float, weekday: int) -> str:
    return fit_field(f"TEM {int(celsius):02d}C {weekday_abbrev(weekday)}")


def format_clock(clock: ClockReading) -> str:
    return fit_field(f"{clock.day} {clock.hour}:{clock.minute}:{clock.second}")


def format_address(address: str | None) -> str:
    if not address:
        return ""
    return fit_field(address)


__all__ = [
    "WEEKDAYS",
    "format_address",
    "format_clock",
    "format_cpu_load",
    "format_memory",
    "format_temperature",
    "format_uptime",
    "memory_usage",
    "weekday_abbrev",
]
