"""Rich-based summary of a resolved selection.

Renders the selected projects, modules, source directories and classpath of
a launch as a compact table:

    Projects   com.example:app (gwt-app)
    Modules    com.example.App
    Sources    app/src/main/java
               lib/src/main/java
    Classpath  app/target/classes
               ~/.m2/.../gwt-user-2.11.0.jar
"""

from typing import Optional, Sequence

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from .resolve.selection import ResolvedSelection


def _lines(values: Sequence[str], style: str = "") -> Text:
    if not values:
        return Text("(none)", style="dim")
    return Text("\n".join(values), style=style)


def render_selection(selection: ResolvedSelection, title: Optional[str] = None) -> Group:
    """Build the Rich renderable for a selection.

    Args:
        selection: The resolved selection
        title: Optional header line (e.g. the launcher's main class)

    Returns:
        A Rich Group with the header and the summary table.
    """
    table = Table(
        show_header=False,
        show_edge=False,
        show_lines=False,
        box=None,
        padding=(0, 1),
        expand=False,
    )
    table.add_column("Field", style="bold", no_wrap=True, min_width=10)
    table.add_column("Value", overflow="fold")

    table.add_row("Projects", _lines([f"{p.key} ({p.packaging})" for p in selection.projects], style="cyan"))
    table.add_row("Modules", _lines(selection.modules, style="green"))
    table.add_row("Sources", _lines(selection.sources))
    table.add_row("Classpath", _lines(selection.classpath))

    if title is None:
        return Group(table)
    return Group(Text(title, style="bold"), table)


def print_selection(selection: ResolvedSelection, console: Optional[Console] = None, title: Optional[str] = None) -> None:
    """Print a selection summary to a console (stdout by default)."""
    console = console if console is not None else Console()
    console.print(render_selection(selection, title))
