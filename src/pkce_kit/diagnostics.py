"""Rich error reports for pkce_kit exceptions."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pkce_kit.exceptions import PkceError


def build_report(error: PkceError) -> Panel:
    """Build a renderable report: message, help line and a detail table."""
    details = Table(show_header=False, box=None, padding=(0, 1))
    details.add_column("Field", style="cyan")
    details.add_column("Value")
    for name, value in error.details().items():
        details.add_row(name, repr(value))

    body = Group(
        Text(str(error), style="bold red"),
        Text(f"help: {error.help}", style="yellow"),
        details,
    )
    return Panel(body, title=f"[bold]{error.code}[/bold]", border_style="red", expand=False)


def render_error(error: PkceError, console: Console | None = None) -> None:
    """Print a report for `error` to `console` (stderr by default)."""
    console = console or Console(stderr=True)
    console.print(build_report(error))


def format_error(error: PkceError, width: int = 80) -> str:
    """Render the report for `error` as plain text."""
    console = Console(width=width, color_system=None, force_terminal=False)
    with console.capture() as capture:
        console.print(build_report(error))
    return capture.get()
