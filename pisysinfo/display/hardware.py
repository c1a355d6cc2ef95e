"""Hardware output driver for PCD8544 (Nokia 5110) LCDs via luma.lcd."""

from __future__ import annotations

import logging

from PIL import Image

from pisysinfo.config import DisplayConfig
from pisysinfo.display.surface import DisplayInitError, PixelSurface

logger = logging.getLogger(__name__)


class PCD8544Display(PixelSurface):
    """Render committed frames to a bit-banged PCD8544 module."""

    def __init__(self, config: DisplayConfig) -> None:
        super().__init__(config.width, config.height)
        self._config = config
        self._device = None

    def initialize(self) -> None:
        try:
            from luma.core.error import Error as LumaError
            from luma.core.interface.serial import bitbang
            from luma.lcd.device import pcd8544
        except ImportError as exc:
            raise DisplayInitError(
                "Hardware display requires 'luma.lcd' and 'RPi.GPIO' on Raspberry Pi."
            ) from exc

        pins = self._config.pins
        try:
            serial = bitbang(SCLK=pins.sclk, SDA=pins.din, CE=pins.cs, DC=pins.dc, RST=pins.rst)
            device = pcd8544(serial, gpio_LIGHT=pins.light)
            device.contrast(self._config.contrast)
        except (LumaError, ImportError, OSError, RuntimeError) as exc:
            raise DisplayInitError(f"PCD8544 setup failed: {exc}") from exc

        if device.size != self.size:
            raise DisplayInitError(
                f"Display size mismatch. Configured {self.size}, device reports {device.size}."
            )

        self._device = device
        super().initialize()
        logger.info(
            "PCD8544 ready (contrast %d, pins %s)", self._config.contrast, pins
        )

    def _flush(self, image: Image.Image) -> None:
        self._device.display(image)


__all__ = ["PCD8544Display"]
