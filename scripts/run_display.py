"""Show live system info on the PCD8544 LCD (or its PNG emulator)."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
import time

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pisysinfo.config import OUTPUT_HARDWARE, OUTPUTS, AppConfig, load_config
from pisysinfo.data.samples import MetricSampler
from pisysinfo.display import DisplayInitError, EmulatorDisplay, PCD8544Display, PixelSurface
from pisysinfo.log import setup_logging
from pisysinfo.refresh import RefreshLoop

logger = logging.getLogger("run_display")


def build_display(config: AppConfig, output: str) -> PixelSurface:
    if output == OUTPUT_HARDWARE:
        return PCD8544Display(config.display)
    return EmulatorDisplay(
        config.display.width, config.display.height, config.display.frame_path
    )


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml", help="YAML config path")
    parser.add_argument(
        "--output",
        choices=list(OUTPUTS),
        default=None,
        help="Frame output target (defaults to display.output from the config)",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    setup_logging(config.log)

    display = build_display(config, args.output or config.display.output)
    try:
        display.initialize()
    except DisplayInitError as exc:
        logger.error("Display initialization failed: %s", exc)
        return 1

    loop = RefreshLoop(
        display,
        MetricSampler(config.sensors),
        config.refresh.interval_seconds,
    )
    try:
        display.show_splash()
        time.sleep(config.display.splash_seconds)
        logger.info("Refreshing every %.1fs", config.refresh.interval_seconds)
        loop.run_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
