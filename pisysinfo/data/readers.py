"""Readers for the OS data sources shown on the display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import fcntl
import logging
import socket
import struct
import time

import psutil

logger = logging.getLogger(__name__)

SIOCGIFADDR = 0x8915
IFNAMSIZ = 16
# struct ifreq: 16 byte name, then sockaddr_in (family, port, addr)
IFREQ_ADDR_OFFSET = 20

TEMPERATURE_SENTINEL = -1.0

# sysinfo(2) reports load averages as fixed point with 16 fractional bits.
SI_LOAD_SHIFT = 16


@dataclass(frozen=True)
class SystemStats:
    """Aggregate system info, in sysinfo(2) units."""

    uptime_seconds: int
    loads: tuple[int, int, int]
    total_ram: int
    free_ram: int


ZERO_STATS = SystemStats(uptime_seconds=0, loads=(0, 0, 0), total_ram=0, free_ram=0)


@dataclass(frozen=True)
class ClockReading:
    """Wall-clock time split into display fields. weekday: 0=Sunday."""

    day: int
    hour: int
    minute: int
    second: int
    weekday: int


def read_ip_address(interface: str) -> str | None:
    """Return the IPv4 address of an interface, or None if it has none."""
    name = interface.encode("ascii", errors="replace")[: IFNAMSIZ - 1]
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            request = struct.pack("256s", name)
            response = fcntl.ioctl(sock.fileno(), SIOCGIFADDR, request)
    except OSError as exc:
        logger.warning("Address lookup for %s failed: %s", interface, exc)
        return None
    return socket.inet_ntoa(response[IFREQ_ADDR_OFFSET : IFREQ_ADDR_OFFSET + 4])


def read_cpu_temperature(path: str) -> float:
    """Return the sensor reading in degrees C, or TEMPERATURE_SENTINEL."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        logger.warning("Failed to read temperature from %s: %s", path, exc)
        return TEMPERATURE_SENTINEL

    try:
        millidegrees = int(raw.strip())
    except ValueError:
        logger.warning("Unparseable temperature %r in %s", raw, path)
        return TEMPERATURE_SENTINEL
    return millidegrees / 1000.0


def read_system_stats() -> SystemStats:
    """Query uptime, load averages and memory totals.

    On failure the error is logged and zeroed stats are returned, so the
    refresh loop always has something to format.
    """
    try:
        uptime = int(time.time() - psutil.boot_time())
        load1, load5, load15 = psutil.getloadavg()
        memory = psutil.virtual_memory()
    except (psutil.Error, OSError) as exc:
        logger.error("System info query failed: %s", exc)
        return ZERO_STATS

    scale = 1 << SI_LOAD_SHIFT
    return SystemStats(
        uptime_seconds=max(uptime, 0),
        loads=(int(load1 * scale), int(load5 * scale), int(load15 * scale)),
        total_ram=memory.total,
        free_ram=memory.free,
    )


def read_clock(now: datetime | None = None) -> ClockReading:
    """Split local time into the fields the clock line shows."""
    if now is None:
        now = datetime.now()
    return ClockReading(
        day=now.day,
        hour=now.hour,
        minute=now.minute,
        second=now.second,
        weekday=now.isoweekday() % 7,
    )


__all__ = [
    "ClockReading",
    "SystemStats",
    "TEMPERATURE_SENTINEL",
    "ZERO_STATS",
    "read_clock",
    "read_cpu_temperature",
    "read_ip_address",
    "read_system_stats",
]
