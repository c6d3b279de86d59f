"""CLI for the pocketcalc engine.

Usage:
    python -m pocketcalc press 12+3=              # Show the display after a key sequence
    python -m pocketcalc press 1 + 2 x 3 = --raw  # Raw display string, for scripts
    python -m pocketcalc trace 5 / 0 = 7          # Step-by-step state table
    python -m pocketcalc keys                     # List key bindings
    python -m pocketcalc repl                     # Interactive session
"""

from __future__ import annotations

from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pocketcalc.display import format_for_display
from pocketcalc.engine import CalculatorEngine
from pocketcalc.keymap import KEY_BINDINGS, UnknownKeyError, events_for, tokenize
from pocketcalc.models import EngineState, InputEvent
from pocketcalc.settings import Settings, SettingsError, load_settings

app = typer.Typer(
    name="pocketcalc",
    help="Immediate-execution pocket calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_QUIT_WORDS = ("quit", "exit")


def _load_settings() -> Settings:
    """Resolve settings or exit with a readable error."""
    try:
        return load_settings()
    except SettingsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _parse_keys(keys: List[str]) -> List[str]:
    return tokenize(" ".join(keys))


def _events_or_exit(keys: List[str]) -> List[InputEvent]:
    try:
        return events_for(keys)
    except UnknownKeyError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}. Run 'pocketcalc keys' for the key table.")
        raise typer.Exit(1)


def _render(state: EngineState, settings: Settings) -> None:
    """Print the calculator face: history line over the display."""
    shown = format_for_display(state.display, settings.max_fraction_digits, settings.grouping)
    body = Text(justify="right")
    body.append(state.history or " ", style="dim")
    body.append("\n")
    body.append(shown, style="bold red" if state.is_error else "bold")
    out.print(Panel(body, title="pocketcalc", width=40))


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. '12+3=' or '1 + 2 ='"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print the raw display string only"),
) -> None:
    """Press a key sequence on a fresh calculator and show the result."""
    settings = _load_settings()
    events = _events_or_exit(_parse_keys(keys))

    engine = CalculatorEngine(error_token=settings.error_token)
    engine.feed(events)

    if raw:
        out.print(engine.display, markup=False, highlight=False)
        return
    _render(engine.state, settings)


@app.command("trace")
def cmd_trace(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. '2+3*4='"),
) -> None:
    """Show the engine state after every key."""
    settings = _load_settings()
    key_names = _parse_keys(keys)
    events = _events_or_exit(key_names)

    engine = CalculatorEngine(error_token=settings.error_token)

    table = Table(title="Key trace", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", style="green")
    table.add_column("Display", justify="right", min_width=12)
    table.add_column("History", style="dim")
    table.add_column("Pending", justify="right")
    table.add_column("Waiting", justify="center")

    for i, (name, event) in enumerate(zip(key_names, events), 1):
        state = engine.press(event)
        pending = f"{state.previous_value} {state.operation.symbol}" if state.operation else "--"
        table.add_row(
            str(i),
            escape(name),
            f"[red]{escape(state.display)}[/red]" if state.is_error else state.display,
            state.history or "--",
            pending,
            "yes" if state.waiting_for_value else "",
        )

    out.print()
    out.print(table)
    out.print()


@app.command("keys")
def cmd_keys() -> None:
    """List key bindings."""
    table = Table(title="Key Bindings", show_header=True, header_style="bold")
    table.add_column("Keys", style="green", min_width=15)
    table.add_column("Action", min_width=20)

    for binding in KEY_BINDINGS:
        table.add_row(escape("  ".join(binding.keys)), binding.description)

    out.print()
    out.print(table)
    out.print()


@app.command("repl")
def cmd_repl() -> None:
    """Interactive session: one key sequence per line, 'quit' to leave."""
    settings = _load_settings()
    engine = CalculatorEngine(error_token=settings.error_token)
    console.print("[dim]Type keys (e.g. 12+3=), 'quit' to exit.[/dim]")
    _render(engine.state, settings)

    while True:
        try:
            line = console.input("> ")
        except EOFError:
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        if not line.strip():
            continue
        try:
            engine.feed(events_for(tokenize(line)))
        except UnknownKeyError as e:
            # Nothing from a bad line is applied; the session keeps going
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            continue
        _render(engine.state, settings)


if __name__ == "__main__":
    app()
