"""Interactive settings menu shown between flights."""

from __future__ import annotations

from typing import Callable

from core.config import GameConfig

Prompt = Callable[[str], str]
Write = Callable[[str], None]


def _parse_number(text: str, kind: type):
    try:
        return kind(text.strip())
    except ValueError:
        return None


def _menu_lines(config: GameConfig) -> list[str]:
    return [
        "",
        "=== GAME CONFIGURATION ===",
        f"1. Gravity:       {config.gravity:.2f} m/s²",
        f"2. Engine Force:  {config.engine_force:.2f} m/s²",
        f"3. Initial Fuel:  {config.initial_fuel} burns",
        f"4. Display Mode:  {config.display_mode}",
        "5. Return to game",
    ]


def run_config_menu(config: GameConfig, prompt: Prompt = input, write: Write = print) -> None:
    """Edit config in place until the player picks 5 or input runs out.

    Unparseable menu choices re-prompt; unparseable values leave the setting
    unchanged.
    """
    while True:
        for line in _menu_lines(config):
            write(line)
        try:
            choice = _parse_number(prompt("Choose setting to change (1-5): "), int)
            if choice == 1:
                value = _parse_number(prompt("Enter new gravity (e.g., 1.6 for Moon): "), float)
                if value is not None:
                    config.gravity = value
            elif choice == 2:
                value = _parse_number(prompt("Enter new engine force (m/s²): "), float)
                if value is not None:
                    config.engine_force = value
            elif choice == 3:
                value = _parse_number(prompt("Enter new initial fuel: "), int)
                if value is not None:
                    config.initial_fuel = value
            elif choice == 4:
                config.display_delta_v = not config.display_delta_v
                write(f"Display mode set to {config.display_mode}")
            elif choice == 5:
                write("Returning to main menu...")
                return
            else:
                write("Invalid choice.")
        except EOFError:
            return
