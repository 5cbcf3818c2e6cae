"""Radar visualizer: draws terrain and lander into a character grid.

Rendering is split in two steps. render_radar_view() produces a RadarFrame
(pure data, easy to inspect in tests); format_radar_frame() turns a frame
into the bordered text block shown to the player.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.lander import Lander
from core.terrain import Terrain
from ui.camera import Camera

BLANK = " "
FLAT = "_"
RISING = "/"
FALLING = "\\"
FILL = "#"
LANDER = "A"
EXHAUST = "*"

SLOPE_THRESHOLD = 0.5


@dataclass
class RadarFrame:
    camera: Camera
    cells: list[list[str]]

    @property
    def lines(self) -> list[str]:
        return ["".join(row) for row in self.cells]

    @property
    def row_altitudes(self) -> list[float]:
        return [self.camera.row_altitude(r) for r in range(self.camera.rows)]

    def cell(self, column: int, row: int) -> str:
        return self.cells[row][column]

    def find(self, glyph: str) -> tuple[int, int] | None:
        """(column, row) of the first occurrence of glyph, scanning top-down."""
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value == glyph:
                    return c, r
        return None


def _surface_glyph(height: float, prev_height: float, first_column: bool) -> str:
    if first_column:
        return FLAT
    if height > prev_height + SLOPE_THRESHOLD:
        return RISING
    if height < prev_height - SLOPE_THRESHOLD:
        return FALLING
    return FLAT


def _draw_terrain(frame: RadarFrame, terrain: Terrain) -> None:
    cam = frame.camera
    prev_height = 0.0
    for column in range(cam.columns):
        height = terrain.interpolated_height(cam.column_to_world_x(column))
        row = cam.world_y_to_row(height)
        if not cam.contains_cell(column, row):
            # Off-window columns keep the previous drawn height for slope glyphs
            continue
        frame.cells[row][column] = _surface_glyph(height, prev_height, column == 0)
        prev_height = height
        for fill_row in range(row + 1, cam.rows):
            frame.cells[fill_row][column] = FILL


def _draw_lander(frame: RadarFrame, lander: Lander) -> None:
    cam = frame.camera
    column = cam.world_x_to_column(lander.x)
    row = cam.world_y_to_row(lander.altitude)
    if not cam.contains_cell(column, row):
        return
    if frame.cells[row][column] == BLANK:
        frame.cells[row][column] = LANDER
    if lander.engines_on and row < cam.rows - 1 and frame.cells[row + 1][column] == BLANK:
        frame.cells[row + 1][column] = EXHAUST


def render_radar_view(lander: Lander, terrain: Terrain, camera: Camera | None = None) -> RadarFrame:
    """Draw the side-on cross-section; the camera follows altitude unless given."""
    cam = camera if camera is not None else Camera.for_altitude(lander.altitude)
    frame = RadarFrame(
        camera=cam,
        cells=[[BLANK] * cam.columns for _ in range(cam.rows)],
    )
    _draw_terrain(frame, terrain)
    _draw_lander(frame, lander)
    return frame


def format_radar_frame(frame: RadarFrame) -> list[str]:
    cam = frame.camera
    inner = cam.columns + 2
    title = "---[ RADAR VISUALS ]"
    out = ["." + title + "-" * (inner - len(title)) + "."]
    for line, altitude in zip(frame.lines, frame.row_altitudes):
        out.append(f"| {line} | {altitude:+.0f}m")
    out.append("`" + "-" * inner + "´")
    half = cam.columns // 2
    out.append(f"  {f'{cam.x_span.min:+.0f}m':<{half}}0m{f'{cam.x_span.max:+.0f}m':>{half}}")
    return out
