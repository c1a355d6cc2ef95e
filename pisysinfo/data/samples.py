"""One-shot sampling of every metric the display shows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pisysinfo.config import SensorConfig
from pisysinfo.data.readers import (
    TEMPERATURE_SENTINEL,
    ZERO_STATS,
    ClockReading,
    SystemStats,
    read_clock,
    read_cpu_temperature,
    read_ip_address,
    read_system_stats,
)

UPTIME = "uptime"
LOAD = "load"
MEMORY = "memory"
TEMPERATURE = "temperature"
TIME = "time"
ADDRESS = "address"


@dataclass(frozen=True)
class RawSample:
    """Single metric measurement; value holds the sentinel when not valid."""

    kind: str
    value: Any
    valid: bool = True


@dataclass(frozen=True)
class MetricSamples:
    """Everything read during one refresh iteration."""

    uptime: RawSample  # seconds since boot
    load: RawSample  # kernel fixed-point 1 minute load
    memory: RawSample  # (total bytes, free bytes)
    temperature: RawSample  # degrees C
    clock: RawSample  # ClockReading
    address: RawSample  # dotted quad or None


class MetricSampler:
    """Reads each configured source once per call to sample()."""

    def __init__(
        self,
        sensors: SensorConfig,
        stats_reader: Callable[[], SystemStats] = read_system_stats,
        clock_reader: Callable[[], ClockReading] = read_clock,
    ) -> None:
        self._sensors = sensors
        self._stats_reader = stats_reader
        self._clock_reader = clock_reader

    def sample(self) -> MetricSamples:
        stats = self._stats_reader()
        stats_valid = stats is not ZERO_STATS

        temperature = read_cpu_temperature(self._sensors.thermal_path)
        address = read_ip_address(self._sensors.interface)

        return MetricSamples(
            uptime=RawSample(UPTIME, stats.uptime_seconds, stats_valid),
            load=RawSample(LOAD, stats.loads[0], stats_valid),
            memory=RawSample(MEMORY, (stats.total_ram, stats.free_ram), stats_valid),
            temperature=RawSample(
                TEMPERATURE, temperature, temperature != TEMPERATURE_SENTINEL
            ),
            clock=RawSample(TIME, self._clock_reader()),
            address=RawSample(ADDRESS, address, address is not None),
        )


__all__ = [
    "ADDRESS",
    "LOAD",
    "MEMORY",
    "MetricSampler",
    "MetricSamples",
    "RawSample",
    "TEMPERATURE",
    "TIME",
    "UPTIME",
]
