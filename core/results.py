"""Append-only flight results log."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from core.landing_sites import landing_safety
from core.lander import Lander
from core.terrain import Terrain

logger = logging.getLogger(__name__)

OUTCOME_LABELS = {"landed": "SUCCESS", "crashed": "CRASHED"}


@dataclass(frozen=True)
class FlightResult:
    label: str
    x: float
    altitude: float
    vx: float
    vy: float
    fuel: int
    safety: float
    timestamp: datetime


def build_flight_result(
    lander: Lander,
    terrain: Terrain,
    *,
    timestamp: datetime | None = None,
) -> FlightResult:
    label = OUTCOME_LABELS.get(lander.state)
    if label is None:
        raise ValueError(f"Flight has not ended (state={lander.state!r})")
    return FlightResult(
        label=label,
        x=lander.x,
        altitude=lander.altitude,
        vx=lander.vx,
        vy=lander.vy,
        fuel=lander.fuel,
        safety=landing_safety(terrain, lander.x),
        timestamp=timestamp if timestamp is not None else datetime.now(),
    )


def format_result_block(result: FlightResult) -> str:
    stamp = result.timestamp.strftime("%a %b %d %H:%M:%S %Y")
    return (
        f"[{stamp}] - {result.label}\n"
        f"  Final Position: H={result.x:.1f} m, V={result.altitude:.1f} m\n"
        f"  Impact Velocity: H={result.vx:.1f} m/s, V={result.vy:.1f} m/s\n"
        f"  Fuel Remaining: {result.fuel} burns\n"
        f"  Landing Zone Safety: {result.safety:.0f}% (at A={result.x:.1f} m)\n"
        "\n"
    )


def append_result(path: str | Path, result: FlightResult) -> bool:
    """Append one result block; returns False when the log cannot be written."""
    out = Path(path)
    try:
        with out.open("a", encoding="utf-8") as fh:
            fh.write(format_result_block(result))
    except OSError as exc:
        logger.warning("Could not write result to %s: %s", out, exc)
        return False
    logger.debug("Appended %s result to %s", result.label, out)
    return True
