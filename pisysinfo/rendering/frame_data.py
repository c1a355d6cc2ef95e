"""Data structures for rendering frames."""

from __future__ import annotations

from dataclasses import dataclass

MAX_FIELD_CHARS = 16
ROW_SPACING = 8


def fit_field(text: str, width: int = MAX_FIELD_CHARS) -> str:
    """Cut text to the field budget."""
    return text[:width]


@dataclass(frozen=True)
class FormattedLine:
    """Single display row of bounded text."""

    text: str
    y: int
    x: int = 0

    def __post_init__(self) -> None:
        if len(self.text) > MAX_FIELD_CHARS:
            raise ValueError(
                f"Field text exceeds {MAX_FIELD_CHARS} characters: {self.text!r}"
            )
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Line position must be non-negative, got ({self.x}, {self.y})")


@dataclass(frozen=True)
class DisplayFrame:
    """All lines committed to the display in one refresh."""

    lines: tuple[FormattedLine, ...]

    def __post_init__(self) -> None:
        rows = [line.y for line in self.lines]
        for upper, lower in zip(rows, rows[1:]):
            if lower - upper < ROW_SPACING:
                raise ValueError(
                    f"Rows must increase by at least {ROW_SPACING}px, got {upper} then {lower}"
                )

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self.lines]


__all__ = ["DisplayFrame", "FormattedLine", "MAX_FIELD_CHARS", "ROW_SPACING", "fit_field"]
