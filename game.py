"""Game orchestration: turns player commands into resolved turns."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable

from core.components import TurnCommand
from core.config import RESULTS_PATH, GameConfig
from core.level import Flight, create_flight
from core.results import append_result, build_flight_result
from core.sensor import activate_radar, read_radar
from ui.config_menu import run_config_menu
from ui.hud import build_radar_lines, build_status_lines
from ui.renderer import format_radar_frame, render_radar_view

logger = logging.getLogger(__name__)

TURN_COMMANDS: dict[str, TurnCommand] = {
    "Y": "burn_left",
    "Z": "burn_right",
    "X": "drift",
}
IDLE_COMMANDS = ("V", "C", "Q")
KNOWN_COMMANDS = "VWSYZXRCQ"

INTRO_LINES = [
    "=== MOON LANDER WITH DYNAMIC RADAR VISUALS ===",
    "Commands: V-Start, W-Engines On, S-Engines Off, Y-Left Burn, Z-Right Burn",
    "          X-Drift (skip burn), R-Activate Radar, C-Configure, Q-Quit",
]


class LanderGame:
    """Owns the session config and the current flight, and resolves commands.

    Output goes through `write` one line at a time so the loop can run
    against a terminal or a list in tests.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        results_path: str | Path = RESULTS_PATH,
        write: Callable[[str], None] = print,
        prompt: Callable[[str], str] = input,
    ):
        self.config = config if config is not None else GameConfig()
        self.rng = random.Random(seed)
        self.results_path = Path(results_path)
        self.write = write
        self.prompt = prompt
        self.flight: Flight | None = None
        self.running = True

    @property
    def flight_active(self) -> bool:
        return self.flight is not None and not self.flight.finished

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self.write(line)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        self._emit(INTRO_LINES)
        self.write(f"Display Mode: {self.config.display_mode}")
        self.write("")
        self.write("NOTE: Use Radar (R) to activate the visual display, which zooms in on approach.")
        self.write("Press 'V' to begin a new game.")

        while self.running:
            try:
                raw = self.prompt("\nCommand: ")
            except EOFError:
                self.write("")
                raw = "Q"
            self.handle_command(raw)

    def handle_command(self, raw: str) -> bool:
        """Dispatch one line of player input; returns False once the game quits."""
        text = raw.strip()
        if not text:
            return self.running
        command = text[0].upper()

        if not self.flight_active and command not in IDLE_COMMANDS:
            self.write("Game over. Press 'V' to start a new game or 'Q' to quit.")
            return self.running

        if command == "V":
            self.new_flight()
        elif command == "C":
            run_config_menu(self.config, self.prompt, self.write)
            self.write("")
            self.write("Configuration updated. Press 'V' to start a new game with these settings.")
        elif command == "Q":
            self.write("Thanks for playing Moon Lander!")
            self.running = False
        elif command == "W":
            self.set_engines(True)
        elif command == "S":
            self.set_engines(False)
        elif command == "R":
            self.activate_radar()
        elif command in TURN_COMMANDS:
            self.take_turn(TURN_COMMANDS[command])
        else:
            self.write(f"Unknown command. Use: {', '.join(KNOWN_COMMANDS)}")
        return self.running

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _require_flight(self) -> Flight:
        if self.flight is None:
            raise RuntimeError("No flight in progress")
        return self.flight

    def new_flight(self) -> Flight:
        self.flight = create_flight(self.config, self.rng)
        lander = self.flight.lander
        logger.debug(
            "New flight: pos=(%.1f, %.1f) vel=(%.1f, %.1f) recommended x=%.1f (%.0f%%)",
            lander.x, lander.altitude, lander.vx, lander.vy,
            self.flight.site.x, self.flight.site.score,
        )
        self.write("")
        self.write("=== NEW GAME STARTED ===")
        self.show_status()
        return self.flight

    def set_engines(self, on: bool) -> None:
        self._require_flight().lander.engines_on = on
        self.write(f">>> Main Engines {'ON' if on else 'OFF'}. <<<")

    def activate_radar(self) -> bool:
        lander = self._require_flight().lander
        if not activate_radar(lander.radar, lander.tank):
            self.write("No fuel remaining! Cannot activate radar.")
            return False
        self.write("")
        self.write("=== ACTIVATING LANDING RADAR (1 fuel consumed) ===")
        self.show_radar()
        self.show_status()
        if lander.fuel <= 0:
            self._warn_fuel_depleted()
        return True

    def take_turn(self, command: TurnCommand) -> bool:
        """Resolve one burn/drift turn; returns False when the command was refused."""
        flight = self._require_flight()
        lander = flight.lander

        if lander.fuel <= 0:
            self.write("No fuel remaining! Lander is now drifting.")
            lander.engines_on = False
            command = "drift"

        if command != "drift" and not lander.engines_on:
            self.write("Cannot burn. Main engines are OFF (use 'W' to turn on).")
            return False

        if lander.radar.active:
            self.write("")
            self.write("[Radar data from previous position]")
            self.show_radar()

        flight.resolve_turn(command)

        if lander.radar.signal_lost:
            self.write(">>> Landing radar signal lost. Visuals deactivated. <<<")

        self.show_status()

        if flight.finished:
            self._finish_flight(flight)
        elif lander.fuel <= 0:
            self._warn_fuel_depleted()
        return True

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def show_radar(self) -> None:
        lander = self._require_flight().lander
        reading = read_radar(lander.radar, lander.trans)
        if reading is None:
            return
        self.write("")
        self._emit(build_radar_lines(reading))

    def show_status(self) -> None:
        flight = self._require_flight()
        if flight.lander.radar.active:
            self.write("")
            self._emit(format_radar_frame(render_radar_view(flight.lander, flight.terrain)))
        self.write("")
        self._emit(build_status_lines(flight.lander, self.config))

    def _warn_fuel_depleted(self) -> None:
        self.write("")
        self.write("*** WARNING: FUEL DEPLETED. ***")

    def _finish_flight(self, flight: Flight) -> None:
        self.write("")
        if flight.lander.state == "landed":
            self.write("*** THE EAGLE HAS LANDED! SUCCESSFUL LANDING! ***")
        else:
            self.write("*** CRASHED! High impact speed. ***")

        result = build_flight_result(flight.lander, flight.terrain)
        if append_result(self.results_path, result):
            self.write(f"Result saved to {self.results_path}")
        else:
            self.write("Error: Could not save result to file.")
