import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from showdown.batch import run_batch
from showdown.config import ON_ERROR_CHOICES, load_settings
from showdown.errors import ParseError
from showdown.hand_evaluator import Outcome, compare, evaluate

console = Console()

OUTCOME_TEXT = {
    Outcome.FIRST_WINS: "Hand 1 wins!",
    Outcome.SECOND_WINS: "Hand 2 wins!",
    Outcome.TIE: "It's a tie!",
}


def _setup_logging(verbose: bool) -> None:
    log = logging.getLogger("showdown")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """Evaluate and compare five-card poker hands."""
    _setup_logging(verbose)


@main.command("eval")
@click.argument("hand")
def eval_cmd(hand):
    """Classify a hand, e.g. "8C TS KC 9H 4S"."""
    try:
        result = evaluate(hand)
    except ParseError as e:
        raise click.ClickException(str(e))
    cards = " ".join(c.pretty() for c in result.cards)
    console.print(f"[bold]{result.label}[/bold]  {cards}")


@main.command("compare")
@click.argument("hand1")
@click.argument("hand2")
def compare_cmd(hand1, hand2):
    """Compare two hands and report the winner."""
    try:
        e1 = evaluate(hand1)
        e2 = evaluate(hand2)
    except ParseError as e:
        raise click.ClickException(str(e))
    console.print(f"Hand 1: {escape(str(e1))}")
    console.print(f"Hand 2: {escape(str(e2))}")
    console.print(f"[bold green]{OUTCOME_TEXT[compare(e1, e2)]}[/bold green]")


@main.command("batch")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="JSON settings file")
@click.option("--on-error", type=click.Choice(ON_ERROR_CHOICES), default=None,
              help="Abort on the first bad line or skip it")
@click.option("--check-duplicates/--no-check-duplicates", default=None,
              help="Reject lines that repeat a card")
@click.option("--workers", type=click.IntRange(min=1), default=None,
              help="Processes used to evaluate lines")
def batch_cmd(path, config_path, on_error, check_duplicates, workers):
    """Tally wins, losses and ties over a file of hand pairs."""
    try:
        settings = load_settings(
            config_path,
            on_error=on_error,
            check_duplicates=check_duplicates,
            workers=workers,
        )
        tally = run_batch(path, settings)
    except ValueError as e:
        raise click.ClickException(str(e))

    table = Table(title=f"Results: {path}")
    table.add_column("Outcome")
    table.add_column("Count", justify="right")
    table.add_row("Hand 1 wins", str(tally.first_wins))
    table.add_row("Hand 2 wins", str(tally.second_wins))
    table.add_row("Ties", str(tally.ties))
    if tally.skipped:
        table.add_row("Skipped", str(tally.skipped), style="yellow")
    console.print(table)


if __name__ == "__main__":
    main()
