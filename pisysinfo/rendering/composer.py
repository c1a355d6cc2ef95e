"""Frame composer for the 84x48 LCD."""

from __future__ import annotations

from pisysinfo.data.samples import MetricSamples
from pisysinfo.rendering.formatter import (
    format_address,
    format_clock,
    format_cpu_load,
    format_memory,
    format_temperature,
    format_uptime,
)
from pisysinfo.rendering.frame_data import DisplayFrame, FormattedLine

DISPLAY_WIDTH = 84
DISPLAY_HEIGHT = 48

TEXT_LEFT_X = 0
ROW_UPTIME = 0
ROW_CPU = 8
ROW_RAM = 16
ROW_TEMPERATURE = 24
ROW_CLOCK = 32
ROW_ADDRESS = 40


def compose_frame(samples: MetricSamples) -> DisplayFrame:
    """Format one iteration's samples into the fixed six-line layout."""
    total_ram, free_ram = samples.memory.value
    clock = samples.clock.value

    return DisplayFrame(
        lines=(
            FormattedLine(format_uptime(samples.uptime.value), ROW_UPTIME, TEXT_LEFT_X),
            FormattedLine(format_cpu_load(samples.load.value), ROW_CPU, TEXT_LEFT_X),
            FormattedLine(format_memory(total_ram, free_ram), ROW_RAM, TEXT_LEFT_X),
            FormattedLine(
                format_temperature(samples.temperature.value, clock.weekday),
                ROW_TEMPERATURE,
                TEXT_LEFT_X,
            ),
            FormattedLine(format_clock(clock), ROW_CLOCK, TEXT_LEFT_X),
            FormattedLine(format_address(samples.address.value), ROW_ADDRESS, TEXT_LEFT_X),
        )
    )


__all__ = ["DISPLAY_HEIGHT", "DISPLAY_WIDTH", "compose_frame"]
