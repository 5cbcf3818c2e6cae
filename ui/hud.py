"""Status and radar readouts as plain text lines."""

from __future__ import annotations

from core.config import GameConfig
from core.lander import Lander
from core.sensor import RadarReading


def build_status_lines(lander: Lander, config: GameConfig) -> list[str]:
    lines: list[str] = ["--- LANDER STATUS ---"]
    lines.append(f"A (X pos): {lander.x:8.1f} m")
    lines.append(f"B (Alt):   {lander.altitude:8.1f} m")

    if config.display_delta_v:
        delta = lander.physics.delta_vel
        lines.append(f"ΔV H:      {delta.x:8.1f} m/s")
        lines.append(f"ΔV V:      {delta.y:8.1f} m/s")
    else:
        h_arrow = "->" if lander.vx > 0 else "<-"
        v_arrow = "v (Down)" if lander.vy < 0 else "^ (Up)"
        lines.append(f"Vel H:     {lander.vx:8.1f} m/s  {h_arrow}")
        lines.append(f"Vel V:     {lander.vy:8.1f} m/s  {v_arrow}")

    lines.append(f"C (Fuel):  {lander.fuel:8d} burns")
    lines.append(f"Engines:   {'ON' if lander.engines_on else 'OFF'}")

    radar = lander.radar
    if radar.active:
        lines.append(f"Radar:     ACTIVE ({radar.turns_remaining} turns remaining)")
    else:
        lines.append("Radar:     INACTIVE (use 'R' for visuals)")
    lines.append("---------------------")
    return lines


def build_radar_lines(reading: RadarReading) -> list[str]:
    lines = [
        f"--- LANDING RADAR DATA (Valid for {reading.turns_remaining} more turns) ---",
        f"RECOMMENDED LANDING ZONE: A={reading.recommended_x:.1f} m "
        f"(Safety: {reading.recommended_score:.0f}%)",
        f"Distance to recommended zone: {reading.distance:.1f} m",
    ]
    if reading.advisory:
        lines.append(f"ADVISORY: {reading.advisory}")
    lines.append("-----------------------------------------------")
    return lines
