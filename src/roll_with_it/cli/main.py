"""Typer CLI application."""
from __future__ import annotations

from typing import Optional

import typer

from roll_with_it.app import RollSession, configure_logging, load_config
from roll_with_it.cli.display import Display
from roll_with_it.models.roll import RollMode

app = typer.Typer(
    name="roll-with-it",
    help="Dice roller and character arithmetic for D&D 5e",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    config = load_config(config_path)
    configure_logging(config, verbose=verbose)
    ctx.obj = config


@app.command()
def roll(
    ctx: typer.Context,
    notation: str = typer.Argument(..., help="Dice notation, e.g. 1d20+5, 2d6, d8-1"),
    advantage: bool = typer.Option(False, "--advantage", "-a", help="Roll a d20 twice, keep the higher set"),
    disadvantage: bool = typer.Option(False, "--disadvantage", "-d", help="Roll a d20 twice, keep the lower set"),
    label: Optional[str] = typer.Option(None, "--label", "-l", help="Annotation, e.g. 'Strength Check'"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="How many times to roll"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the generator for repeatable rolls"),
    history: bool = typer.Option(False, "--history", help="Show the session history afterwards"),
) -> None:
    """Roll dice."""
    from roll_with_it.mechanics.dice import parse_notation

    if advantage and disadvantage:
        Display().show_error("Choose either --advantage or --disadvantage, not both.")
        raise typer.Exit(code=1)
    mode = RollMode.ADVANTAGE if advantage else RollMode.DISADVANTAGE if disadvantage else RollMode.NORMAL

    try:
        session = RollSession.from_config(ctx.obj or {}, seed=seed)
        spec = parse_notation(notation, mode=mode, label=label)
        for _ in range(times):
            session.display.show_roll(session.roller.evaluate(spec))
    except ValueError as exc:
        Display().show_error(str(exc))
        raise typer.Exit(code=1)

    if history:
        session.display.show_history(session.history.entries)


@app.command()
def modifier(score: int = typer.Argument(..., help="Ability score")) -> None:
    """Show the modifier for an ability score."""
    from roll_with_it.mechanics.ability_scores import ability_modifier, format_modifier

    Display().console.print(f"{score} -> [bold]{format_modifier(ability_modifier(score))}[/bold]")


@app.command()
def level(xp: int = typer.Argument(..., help="Total experience points")) -> None:
    """Show level, proficiency bonus and next threshold for an XP total."""
    from roll_with_it.mechanics.leveling import level_from_xp, proficiency_bonus, xp_threshold_for_next_level

    lvl = level_from_xp(xp)
    Display().show_level(xp, lvl, proficiency_bonus(lvl), xp_threshold_for_next_level(lvl))


@app.command()
def encumbrance(
    strength: int = typer.Argument(..., help="Strength score"),
    weight: float = typer.Option(0.0, "--weight", "-w", help="Weight carried in pounds"),
) -> None:
    """Show carrying thresholds for a Strength score."""
    from roll_with_it.mechanics.encumbrance import (
        encumbered_threshold,
        encumbrance_status,
        heavily_encumbered_threshold,
    )

    Display().show_encumbrance(
        encumbrance_status(weight, strength),
        encumbered_threshold(strength),
        heavily_encumbered_threshold(strength),
    )


@app.command()
def currency(
    amount: float = typer.Argument(..., help="Number of coins"),
    denomination: str = typer.Argument("gp", help="cp, sp, gp or pp"),
    no_platinum: bool = typer.Option(False, "--no-platinum", help="Keep large sums in gold"),
) -> None:
    """Convert coins to gold and break the value back into coins."""
    from roll_with_it.mechanics.economy import breakdown_from_base_currency, convert_to_base_currency

    display = Display()
    try:
        gold = convert_to_base_currency(amount, denomination)
    except ValueError as exc:
        display.show_error(str(exc))
        raise typer.Exit(code=1)
    display.show_currency(gold, breakdown_from_base_currency(gold, platinum=not no_platinum))


if __name__ == "__main__":
    app()
