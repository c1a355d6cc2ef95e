"""Display output that writes each committed frame to a PNG file."""

from __future__ import annotations

from PIL import Image

from pisysinfo.display.surface import PixelSurface
from pisysinfo.rendering.emulator import PREVIEW_SCALE, save_frame


class EmulatorDisplay(PixelSurface):
    """Stand-in for the LCD when running off the Pi."""

    def __init__(
        self, width: int, height: int, frame_path: str, scale: int = PREVIEW_SCALE
    ) -> None:
        super().__init__(width, height)
        self._frame_path = frame_path
        self._scale = scale

    @property
    def frame_path(self) -> str:
        return self._frame_path

    def _flush(self, image: Image.Image) -> None:
        save_frame(image, self._frame_path, scale=self._scale)


__all__ = ["EmulatorDisplay"]
