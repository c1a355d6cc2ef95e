"""Frame output helpers for the LCD emulator."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

PREVIEW_SCALE = 4


def save_frame(
    image: Image.Image, path: str = "emulator_output/frame.png", scale: int = PREVIEW_SCALE
) -> None:
    """Save a frame to disk as a PNG image, enlarged for viewing."""
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}.")
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if scale != 1:
        width, height = image.size
        image = image.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    image.save(output_path, format="PNG")


__all__ = ["save_frame"]
