# display.py
# All terminal output for the landing page agent.
#
# This module owns presentation entirely. harness.py never formats strings;
# it calls named functions here. Diagnostic logging is routed through the
# same console by configure_logging().
#
# Colour language:
#   cyan     loop / routing events
#   blue     model replies
#   magenta  tool calls
#   green    success / completion
#   red      tool errors, halts

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from landing_agent.models import RunSummary

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _mono(value: str, max_len: int = 120) -> str:
    if len(value) > max_len:
        return value[:max_len] + "…"
    return value


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Run entry
# ---------------------------------------------------------------------------


def banner(model: str, max_iterations: int) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Landing Page Agent[/bold cyan]\n"
            "[dim]Keywords → books → copy → page → routes → PR[/dim]\n\n"
            f"[dim]Model      :[/dim] [white]{model}[/white]\n"
            f"[dim]Iterations :[/dim] [white]{max_iterations} max[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


def ask_theme() -> str:
    return console.input(
        '\n[bold cyan]What landing page idea do you have?[/bold cyan] '
        '[dim](e.g., "romance books", "thriller audiobooks")[/dim]: '
    )


def theme_received(theme: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[white]{escape(theme)}[/white]",
            title=_label("THEME", "cyan"),
            border_style="cyan",
            padding=(0, 2),
        )
    )


# ---------------------------------------------------------------------------
# Loop
# ---------------------------------------------------------------------------


def iteration_start(iteration: int, max_iterations: int) -> None:
    console.print()
    console.print(Rule(f"[cyan]TURN {iteration}/{max_iterations}[/cyan]", style="cyan"))


def agent_message(content: str | None, refusal: str | None = None) -> None:
    if content:
        console.print(_label("AGENT", "blue"), f"[white]{escape(content)}[/white]")
    elif refusal:
        console.print(_label("AGENT REFUSED", "red"), f"[white]{escape(refusal)}[/white]")
    else:
        console.print(_label("AGENT", "blue"), "[dim]empty reply[/dim]")


def tool_executing(name: str, arguments: str) -> None:
    console.print()
    console.print(
        f"  [magenta]Tool[/magenta]     [bold white]{escape(name)}[/bold white]"
        f"  [dim]{escape(_mono(arguments, 200))}[/dim]"
    )


def tool_result(result: Any) -> None:
    preview = escape(_mono(json.dumps(result, ensure_ascii=False), 200))
    console.print(f"  [bold green]✓ Result[/bold green] [white]{preview}[/white]")


def tool_error(name: str, message: str) -> None:
    console.print(
        f"  [bold red]✗ {escape(name)} failed[/bold red] [white]{escape(_mono(message, 200))}[/white]"
    )


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------


def run_finished(summary: RunSummary) -> None:
    if summary.stopped_by_model:
        reason = "Agent finished on its own."
    else:
        reason = "Iteration limit reached."
    console.print()
    console.print(
        Panel(
            f"[bold green]{reason}[/bold green]\n"
            f"[dim]Turns: {summary.iterations}  Tool calls: {summary.tool_calls}[/dim]\n\n"
            "[white]Check your repository for the new branch and PR.[/white]",
            title=_label("DONE", "green"),
            border_style="green",
            padding=(1, 2),
        )
    )
    console.print()


def halt(reason: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{escape(reason)}[/bold white]",
            title=_label("HALT", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )
    console.print()
