"""Built-in terminal color themes."""

from __future__ import annotations

from .models import AnsiTheme

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"

DEFAULT_THEME_NAME = "classic"

THEMES: dict[str, AnsiTheme] = {
    "classic": AnsiTheme(
        name="classic",
        reset=RESET,
        header=CYAN,
        clock=PURPLE,
        ram=GREEN,
        cpu=YELLOW,
        gpu=BLUE,
        network=RED,
    ),
    "plain": AnsiTheme(
        name="plain",
        reset="",
        header="",
        clock="",
        ram="",
        cpu="",
        gpu="",
        network="",
    ),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> AnsiTheme:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
