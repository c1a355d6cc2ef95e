"""In-memory monochrome frame buffer shared by all display outputs."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

SPLASH_LINES = ((12, 8, "Raspberry Pi"), (21, 24, "sysinfo"))


class DisplayInitError(RuntimeError):
    """Raised when the display or its I/O layer cannot be set up."""


class PixelSurface:
    """Mode "1" Pillow buffer with clear / draw_text / commit semantics.

    Subclasses push committed buffers somewhere in _flush(). Nothing drawn
    reaches the output until commit() is called.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Display size must be positive, got {width}x{height}.")
        self._width = width
        self._height = height
        self._image: Image.Image | None = None
        self._draw: ImageDraw.ImageDraw | None = None
        self._font: ImageFont.ImageFont | None = None
        self._commit_count = 0

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def commit_count(self) -> int:
        return self._commit_count

    @property
    def initialized(self) -> bool:
        return self._image is not None

    def initialize(self) -> None:
        """Allocate the buffer. Must run before any other call."""
        self._image = Image.new("1", self.size, 0)
        self._draw = ImageDraw.Draw(self._image)
        self._font = ImageFont.load_default_imagefont()

    def clear(self) -> None:
        self._require_initialized()
        self._draw.rectangle((0, 0, self._width - 1, self._height - 1), fill=0)

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Stage text at pixel (x, y); glyphs past the right edge are clipped."""
        self._require_initialized()
        if text:
            self._draw.text((x, y), text, font=self._font, fill=1)

    def commit(self) -> None:
        """Push the staged buffer to the output."""
        self._require_initialized()
        self._flush(self._image.copy())
        self._commit_count += 1

    def show_splash(self) -> None:
        self.clear()
        for x, y, text in SPLASH_LINES:
            self.draw_text(x, y, text)
        self.commit()

    def snapshot(self) -> Image.Image:
        """Copy of the staged buffer, committed or not."""
        self._require_initialized()
        return self._image.copy()

    def _flush(self, image: Image.Image) -> None:
        raise NotImplementedError

    def _require_initialized(self) -> None:
        if self._image is None:
            raise RuntimeError("Display used before initialize() was called.")


__all__ = ["DisplayInitError", "PixelSurface"]
