from __future__ import annotations

import pytest

from pisysinfo.data.readers import TEMPERATURE_SENTINEL, ClockReading
from pisysinfo.rendering.formatter import (
    WEEKDAYS,
    format_address,
    format_clock,
    format_cpu_load,
    format_memory,
    format_temperature,
    format_uptime,
    memory_usage,
    weekday_abbrev,
)
from pisysinfo.rendering.frame_data import MAX_FIELD_CHARS

MB = 1024 * 1024


def test_format_uptime_minutes() -> None:
    assert format_uptime(125) == "Up 2 min"
    assert format_uptime(59) == "Up 0 min"


def test_format_cpu_load_keeps_raw_scaling() -> None:
    # 0.5 load in kernel fixed point
    assert format_cpu_load(32768) == "CPU 32%"
    assert format_cpu_load(0) == "CPU 0%"


def test_format_memory() -> None:
    assert format_memory(1024 * MB, 256 * MB) == "RAM 768M 75"
    assert format_memory(512 * MB, 448 * MB) == "RAM 064M 12"


def test_format_memory_zero_total() -> None:
    assert format_memory(0, 0) == "RAM 000M 00"


@pytest.mark.parametrize(
    "total, free",
    [
        (1024 * MB, 256 * MB),
        (3906 * MB + 123, 1 * MB + 7),
        (4096 * MB, 4096 * MB),
        (948 * MB, 0),
        (8 * MB, 9 * MB),
    ],
)
def test_memory_usage_invariants(total: int, free: int) -> None:
    used_mb, free_mb, percent = memory_usage(total, free)

    assert used_mb + free_mb == total // MB
    assert 0 <= percent <= 100


def test_format_temperature() -> None:
    assert format_temperature(45.123, 3) == "TEM 45C Wed"
    assert format_temperature(5.9, 1) == "TEM 05C Mon"


def test_format_temperature_sentinel() -> None:
    assert format_temperature(TEMPERATURE_SENTINEL, 0) == "TEM -1C Sun"


def test_weekday_abbrev_all_days() -> None:
    assert [weekday_abbrev(i) for i in range(7)] == [
        "Sun",
        "Mon",
        "Tue",
        "Wed",
        "Thu",
        "Fri",
        "Sat",
    ]
    assert tuple(weekday_abbrev(i) for i in range(7)) == WEEKDAYS


@pytest.mark.parametrize("index", [-1, 7, 100])
def test_weekday_abbrev_rejects_out_of_range(index: int) -> None:
    with pytest.raises(ValueError):
        weekday_abbrev(index)


def test_format_clock_unpadded() -> None:
    clock = ClockReading(day=7, hour=9, minute=5, second=3, weekday=0)

    assert format_clock(clock) == "7 9:5:3"


def test_format_address() -> None:
    assert format_address("192.168.1.42") == "192.168.1.42"
    assert format_address(None) == ""
    assert format_address("") == ""


def test_fields_stay_within_budget_for_huge_inputs() -> None:
    huge = 10**30
    fields = [
        format_uptime(huge),
        format_cpu_load(huge),
        format_memory(huge, 0),
        format_temperature(float(huge), 6),
        format_clock(ClockReading(day=huge, hour=huge, minute=huge, second=huge, weekday=0)),
        format_address("x" * 64),
    ]

    for field in fields:
        assert len(field) <= MAX_FIELD_CHARS
