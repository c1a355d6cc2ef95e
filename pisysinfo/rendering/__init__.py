"""Formatting and layout of the sysinfo frame."""

from pisysinfo.rendering.composer import compose_frame
from pisysinfo.rendering.emulator import save_frame
from pisysinfo.rendering.frame_data import DisplayFrame, FormattedLine

__all__ = ["DisplayFrame", "FormattedLine", "compose_frame", "save_frame"]
