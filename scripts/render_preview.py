"""Render a single sysinfo frame from this machine to a PNG file."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pisysinfo.config import SensorConfig
from pisysinfo.data.samples import MetricSampler
from pisysinfo.display import EmulatorDisplay
from pisysinfo.rendering.composer import DISPLAY_HEIGHT, DISPLAY_WIDTH
from pisysinfo.refresh import RefreshLoop


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--interface", default="eth0")
    parser.add_argument("--thermal-path", default="/sys/class/thermal/thermal_zone0/temp")
    parser.add_argument("--output", default="emulator_output/frame.png")
    parser.add_argument("--scale", type=int, default=4)
    args = parser.parse_args()

    display = EmulatorDisplay(DISPLAY_WIDTH, DISPLAY_HEIGHT, args.output, scale=args.scale)
    display.initialize()
    sampler = MetricSampler(SensorConfig(interface=args.interface, thermal_path=args.thermal_path))
    frame = RefreshLoop(display, sampler, interval_seconds=1.0).run_once()

    for line in frame.lines:
        print(f"{line.y:>2} {line.text}")
    print("frame_saved", {"path": args.output}, flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
