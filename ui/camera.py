"""Viewport mapping between world metres and radar grid cells."""

from __future__ import annotations

from dataclasses import dataclass

from core.config import (
    APPROACH_VIEW_HEADROOM,
    APPROACH_VIEW_HEIGHT,
    LANDING_MODE_ALTITUDE,
    LANDING_VIEW_FLOOR,
    LANDING_VIEW_HEIGHT,
    VIEW_COLUMNS,
    VIEW_ROWS,
)
from core.maths import Range1D, round_half_away
from core.terrain import TERRAIN_SPAN


@dataclass(frozen=True)
class Camera:
    """Side-on window onto the world, rows counted from the top.

    Args:
        y_min: Altitude at the bottom row
        view_height: Metres covered from bottom row to top row
        mode: "landing" or "approach"
    """

    y_min: float
    view_height: float
    mode: str = "approach"
    columns: int = VIEW_COLUMNS
    rows: int = VIEW_ROWS
    x_span: Range1D = TERRAIN_SPAN

    @classmethod
    def for_altitude(cls, altitude: float, **kwargs) -> "Camera":
        """Zoom in close to the ground below LANDING_MODE_ALTITUDE, else track the lander."""
        if altitude < LANDING_MODE_ALTITUDE:
            return cls(LANDING_VIEW_FLOOR, LANDING_VIEW_HEIGHT, "landing", **kwargs)
        y_max = altitude + APPROACH_VIEW_HEADROOM
        return cls(y_max - APPROACH_VIEW_HEIGHT, APPROACH_VIEW_HEIGHT, "approach", **kwargs)

    @property
    def y_max(self) -> float:
        return self.y_min + self.view_height

    def column_to_world_x(self, column: int) -> float:
        return self.x_span.at_fraction(column / (self.columns - 1))

    def world_x_to_column(self, x: float) -> int:
        return round_half_away(self.x_span.fraction(x) * (self.columns - 1))

    def world_y_to_row(self, y: float) -> int:
        return (self.rows - 1) - round_half_away(
            (y - self.y_min) / self.view_height * (self.rows - 1)
        )

    def row_altitude(self, row: int) -> float:
        return self.y_max - row / (self.rows - 1) * self.view_height

    def contains_cell(self, column: int, row: int) -> bool:
        return 0 <= column < self.columns and 0 <= row < self.rows
