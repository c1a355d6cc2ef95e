"""Display output adapters."""

from pisysinfo.display.emulator import EmulatorDisplay
from pisysinfo.display.hardware import PCD8544Display
from pisysinfo.display.surface import DisplayInitError, PixelSurface

__all__ = ["DisplayInitError", "EmulatorDisplay", "PCD8544Display", "PixelSurface"]
