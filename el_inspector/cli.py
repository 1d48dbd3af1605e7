from __future__ import annotations

import click

from el_inspector.core.errors import GameError, RosterError
from el_inspector.core.roster import Roster
from el_inspector.core.round import RoundStateMachine
from el_inspector.core.shuffle import build_rng
from el_inspector.core.types import IMPOSTOR_COUNT, MIN_PLAYERS, GameConfig, Phase
from el_inspector.prompts import (
    REVEAL_INSTRUCTIONS,
    SETUP_INSTRUCTIONS,
    TITLE,
    UNDO_COMMAND,
    build_card_face,
    build_end_prompt,
    build_setup_status,
)
from el_inspector.stats.fairness import run_fairness_trials

END_CHOICES = ["replay", "new", "quit"]


@click.group()
def cli():
    """El inspector - pass-and-play impostor card dealer."""
    pass


@cli.command()
@click.option("--impostors", "-i", default=IMPOSTOR_COUNT, show_default=True, type=click.IntRange(min=0))
@click.option("--min-players", default=MIN_PLAYERS, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", type=int, default=None, help="Seed for reproducible deals")
@click.option("--verbose", "-v", is_flag=True, help="Print the session log on exit")
def play(impostors: int, min_players: int, seed: int | None, verbose: bool):
    """Run a pass-and-play session on this terminal."""
    config = GameConfig(
        impostor_count=impostors,
        min_players=min_players,
        seed=seed,
        verbose=verbose,
    )
    game = RoundStateMachine(config)

    click.echo(f"\n{TITLE}\n")
    keep_playing = True
    while keep_playing:
        if game.phase == Phase.SETUP:
            _run_setup(game)
        elif game.phase == Phase.REVEAL:
            _run_reveal(game)
        else:
            keep_playing = _run_end(game)

    click.echo("\nBye!")
    if config.verbose:
        click.echo(game.transcript.render_text())


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--trials", "-n", default=10000, show_default=True, type=click.IntRange(min=1))
@click.option("--impostors", "-i", default=IMPOSTOR_COUNT, show_default=True, type=click.IntRange(min=0))
@click.option("--seed", type=int, default=None)
def simulate(names: tuple[str, ...], trials: int, impostors: int, seed: int | None):
    """Deal many rounds to NAMES and compare frequencies with the fair odds."""
    roster = Roster()
    for name in names:
        try:
            roster.add(name)
        except RosterError as e:
            raise click.BadParameter(str(e), param_hint="NAMES")

    try:
        report = run_fairness_trials(
            roster.snapshot(),
            trials,
            impostor_count=impostors,
            randbelow=build_rng(seed).randrange,
        )
    except GameError as e:
        raise click.ClickException(str(e))

    click.echo(f"\n{report.trials} deals, {report.player_count} players, {report.impostor_count} impostors")
    click.echo(f"\n{'Position':<10} {'Impostor':>9} {'Expected':>9}")
    click.echo("-" * 30)
    for position, rate in enumerate(report.impostor_rate_by_position, start=1):
        click.echo(f"{position:<10} {rate:9.3f} {report.expected_impostor_rate:9.3f}")

    click.echo(f"\n{'Secret word':<30} {'Picked':>9} {'Expected':>9}")
    click.echo("-" * 50)
    for name, expected in report.expected_word_rate_by_name.items():
        click.echo(f"{name:<30} {report.word_rate_by_name[name]:9.3f} {expected:9.3f}")

    click.echo(f"\nLargest deviation: {report.max_deviation():.3f}")


# ---------------------------------------------------------------------------
# Session screens
# ---------------------------------------------------------------------------

def _wait_for_enter():
    click.prompt("", default="", show_default=False, prompt_suffix="")


def _run_setup(game: RoundStateMachine):
    click.echo(SETUP_INSTRUCTIONS)
    while game.phase == Phase.SETUP:
        click.echo(build_setup_status(game))
        entry = click.prompt("Name", default="", show_default=False)

        if entry.strip() == UNDO_COMMAND:
            removed = game.remove_last_player()
            click.echo("Removed the last name." if removed is not None else "Nothing to undo.")
            continue

        if not entry.strip():
            try:
                game.start_round()
            except GameError as e:
                click.echo(f"Error: {e}")
            continue

        try:
            game.add_player(entry)
        except RosterError as e:
            click.echo(f"Error: {e}")
            continue
        # Hide the name from the next player.
        click.clear()


def _run_reveal(game: RoundStateMachine):
    click.clear()
    click.echo(REVEAL_INSTRUCTIONS)
    while game.phase == Phase.REVEAL:
        click.echo(build_card_face(game))
        _wait_for_enter()
        game.toggle_or_advance()
        click.clear()


def _run_end(game: RoundStateMachine) -> bool:
    click.echo(build_end_prompt(game))
    choice = click.prompt("Choice", type=click.Choice(END_CHOICES), default="replay")
    if choice == "replay":
        game.replay_same_roster()
    elif choice == "new":
        game.reset_all()
    else:
        return False
    return True
