# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: console.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Nord-themed Rich console and user-facing output helpers.
# -----------------------------------------------------------------------------
import shutil
from typing import Dict, List

import pyfiglet
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class NordColors:
    POLAR_NIGHT_1: str = "#2E3440"
    POLAR_NIGHT_4: str = "#4C566A"
    SNOW_STORM_1: str = "#D8DEE9"
    SNOW_STORM_2: str = "#E5E9F0"
    FROST_1: str = "#8FBCBB"
    FROST_2: str = "#88C0D0"
    FROST_3: str = "#81A1C1"
    FROST_4: str = "#5E81AC"
    RED: str = "#BF616A"
    YELLOW: str = "#EBCB8B"
    GREEN: str = "#A3BE8C"

    @classmethod
    def get_frost_gradient(cls, steps: int = 4) -> List[str]:
        frosts = [cls.FROST_1, cls.FROST_2, cls.FROST_3, cls.FROST_4]
        return frosts[:steps]


NORD_THEME = Theme(
    {
        "info": NordColors.FROST_2,
        "warning": NordColors.YELLOW,
        "error": f"bold {NordColors.RED}",
        "success": NordColors.GREEN,
        "header": f"bold {NordColors.FROST_3}",
        "table.header": f"bold {NordColors.FROST_3}",
        "panel.border": NordColors.FROST_3,
    }
)

console: Console = Console(theme=NORD_THEME)

STATUS_ICONS: Dict[str, str] = {
    "success": "✓",
    "failed": "✗",
    "pending": "?",
    "in_progress": "⋯",
    "skipped": "⏭",
}

STATUS_STYLES: Dict[str, str] = {
    "success": NordColors.GREEN,
    "failed": NordColors.RED,
    "pending": NordColors.YELLOW,
    "in_progress": NordColors.FROST_3,
    "skipped": NordColors.FROST_2,
}


def create_header(title: str, version: str) -> Panel:
    term_width, _ = shutil.get_terminal_size((80, 24))
    font_to_use = "slant" if term_width >= 60 else "small"

    try:
        fig = pyfiglet.Figlet(font=font_to_use, width=min(term_width - 10, 120))
        ascii_art = fig.renderText(title)
    except Exception:
        ascii_art = f"  {title}  "

    ascii_lines = [line for line in ascii_art.splitlines() if line.strip()]
    colors = NordColors.get_frost_gradient(len(ascii_lines)) or [NordColors.FROST_2]
    combined_text = Text()

    for i, line in enumerate(ascii_lines):
        color = colors[i % len(colors)]
        combined_text.append(Text(line, style=f"bold {color}"))
        if i < len(ascii_lines) - 1:
            combined_text.append("\n")

    return Panel(
        combined_text,
        border_style=NordColors.FROST_1,
        padding=(1, 2),
        title=Text(f"v{version}", style=f"bold {NordColors.SNOW_STORM_2}"),
        title_align="right",
        box=box.ROUNDED,
    )


def print_message(
    text: str, style: str = NordColors.FROST_2, prefix: str = "•"
) -> None:
    console.print(f"[{style}]{prefix} {text}[/{style}]")


def print_error(message: str) -> None:
    print_message(message, NordColors.RED, "✗")


def print_success(message: str) -> None:
    print_message(message, NordColors.GREEN, "✓")


def print_warning(message: str) -> None:
    print_message(message, NordColors.YELLOW, "⚠")


def print_step(message: str) -> None:
    print_message(message, NordColors.FROST_2, "→")


def print_section(title: str) -> None:
    console.print()
    console.print(
        Panel(title, style="header", border_style="panel.border", expand=False)
    )


def print_status_report(
    status: Dict[str, Dict[str, str]], descriptions: Dict[str, str]
) -> None:
    """Render the per-step status dictionary as a table."""
    table = Table(
        title="Setup Status Report",
        show_header=True,
        header_style="table.header",
        border_style="panel.border",
        box=box.ROUNDED,
    )
    table.add_column("Step")
    table.add_column("Status")
    table.add_column("Message")

    for task, data in status.items():
        state = data["status"]
        style = STATUS_STYLES.get(state, "")
        icon = STATUS_ICONS.get(state, "?")
        table.add_row(
            descriptions.get(task, task),
            f"[{style}]{icon} {state.upper()}[/{style}]" if style else state.upper(),
            data["message"],
        )
    console.print(table)
