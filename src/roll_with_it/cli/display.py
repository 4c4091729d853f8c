"""Rich terminal display for rolls and derived stats."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from roll_with_it.mechanics.ability_scores import format_modifier
from roll_with_it.mechanics.encumbrance import EncumbranceLevel, EncumbranceStatus, format_weight
from roll_with_it.models.character import Currency
from roll_with_it.models.roll import DieType, RollMode, RollOutcome
from roll_with_it.utils import time_ago

console = Console()

_ENCUMBRANCE_STYLES = {
    EncumbranceLevel.NORMAL: ("Normal", "green"),
    EncumbranceLevel.ENCUMBERED: ("Encumbered", "yellow"),
    EncumbranceLevel.HEAVILY_ENCUMBERED: ("Heavily Encumbered", "dark_orange"),
    EncumbranceLevel.OVER_CAPACITY: ("Over Capacity!", "red"),
}


def _pip(value: int, die_type: DieType, discarded: bool = False) -> Text:
    if discarded:
        return Text(str(value), style="dim strike")
    if die_type is DieType.D20 and value == 20:
        return Text(str(value), style="bold green")
    if die_type is DieType.D20 and value == 1:
        return Text(str(value), style="bold red")
    return Text(str(value), style="bold")


def _pips(values: tuple[int, ...], die_type: DieType, discarded: bool = False) -> Text:
    text = Text("[")
    for i, v in enumerate(values):
        if i:
            text.append(", ")
        text.append_text(_pip(v, die_type, discarded))
    text.append("]")
    return text


class Display:
    def __init__(self, width: int = 80, show_discarded: bool = True):
        self.console = console
        self.width = width
        self.show_discarded = show_discarded

    def show_roll(self, outcome: RollOutcome) -> None:
        content = Text()
        if outcome.label:
            content.append(f"{outcome.label}\n", style="bold yellow")
        content.append(f"{outcome.notation}", style="cyan")
        if outcome.mode is not RollMode.NORMAL:
            content.append(f" ({outcome.mode.value})", style="magenta")
        content.append("  ")
        content.append_text(_pips(outcome.kept_values, outcome.die_type))
        if self.show_discarded and outcome.discarded_values:
            content.append("  ")
            content.append_text(_pips(outcome.discarded_values, outcome.die_type, discarded=True))
        if outcome.modifier:
            content.append(f" {format_modifier(outcome.modifier)}")
        content.append(" = ")
        content.append(str(outcome.total), style="bold")

        if outcome.is_critical:
            border = "green"
            content.append("\nNatural 20!", style="bold green")
        elif outcome.is_fumble:
            border = "red"
            content.append("\nNatural 1!", style="bold red")
        else:
            border = "cyan"
        self.console.print(Panel(content, border_style=border, box=box.ROUNDED, width=self.width))

    def show_history(self, outcomes: list[RollOutcome]) -> None:
        if not outcomes:
            self.console.print("[dim]No rolls yet.[/dim]")
            return
        table = Table(title="Roll History", box=box.SIMPLE_HEAVY, border_style="cyan")
        table.add_column("Roll", style="bold")
        table.add_column("Label")
        table.add_column("Dice")
        table.add_column("Total", justify="right")
        table.add_column("When", style="dim")
        for outcome in outcomes:
            table.add_row(
                outcome.notation,
                Text(outcome.label or "-"),
                _pips(outcome.kept_values, outcome.die_type),
                str(outcome.total),
                time_ago(outcome.created_at),
            )
        self.console.print(table)

    def show_level(self, xp: int, level: int, proficiency: int, next_threshold: int) -> None:
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Attribute", style="bold")
        table.add_column("Value")
        table.add_row("XP", str(xp))
        table.add_row("Level", f"{level} [dim](MAX)[/dim]" if level >= 20 else str(level))
        table.add_row("Proficiency", format_modifier(proficiency))
        if level < 20:
            table.add_row("Next level at", f"{next_threshold} XP ({max(next_threshold - xp, 0)} to go)")
        self.console.print(table)

    def show_encumbrance(self, status: EncumbranceStatus, encumbered_at: int, heavily_at: int) -> None:
        label, color = _ENCUMBRANCE_STYLES[status.level]
        table = Table(title="Encumbrance", box=box.SIMPLE, show_header=False)
        table.add_column("Attribute", style="bold")
        table.add_column("Value")
        table.add_row("Carrying", f"{format_weight(status.carried)} / {format_weight(status.capacity)}")
        table.add_row("Status", f"[{color}]{label}[/{color}] ({status.percent_carried:.0f}%)")
        table.add_row("Encumbered at", format_weight(encumbered_at))
        table.add_row("Heavily encumbered at", format_weight(heavily_at))
        if status.speed_penalty is None:
            table.add_row("Speed", "[red]Cannot move[/red]")
        elif status.speed_penalty:
            table.add_row("Speed", f"-{status.speed_penalty} ft")
        self.console.print(table)

    def show_currency(self, gold: float, purse: Currency) -> None:
        self.console.print(
            f"[yellow]{gold:g} gp[/yellow] = "
            f"{purse.pp} pp, {purse.gp} gp, {purse.sp} sp, {purse.cp} cp"
        )

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
