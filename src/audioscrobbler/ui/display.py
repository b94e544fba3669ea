"""
Display management for the audioscrobbler CLI with Rich components.
"""

from typing import Any, List, Optional, Sequence

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.config import UI_CONFIG
from ..models.entities import Artist, SimilarArtist, SimilarUser, Tag, Track, User


class DisplayManager:
    """Renders fetched entities as tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.max_results = UI_CONFIG["MAX_DISPLAY_RESULTS"]

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(0, 2)
        )

    def format_match(self, match: float) -> Text:
        """Format a similarity score with color based on value."""
        if match >= 75:
            return Text(f"{match:g}", style="bold green")
        elif match >= 40:
            return Text(f"{match:g}", style="bold yellow")
        return Text(f"{match:g}", style="bold red")

    def display_entities(self, entities: Sequence[Any], title: str, limit: Optional[int] = None):
        """Display a list of fetched entities in a table."""
        if not entities:
            self.console.print(f"[bold red]✗[/bold red] No {title} found.")
            return

        limit = limit or self.max_results
        shown = list(entities)[:limit]

        self.console.print(self.create_header_panel(
            title.upper(),
            f"Showing {len(shown)} of {len(entities)} result{'s' if len(entities) != 1 else ''}"
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue"
        )
        table.add_column("#", style="bold white", width=4, justify="center")
        columns = self._columns_for(shown[0])
        for header, style in columns:
            table.add_column(header, style=style)

        for i, entity in enumerate(shown, 1):
            table.add_row(str(i), *self._row_for(entity))

        self.console.print(table)

    def display_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {message}")

    @staticmethod
    def _columns_for(entity: Any) -> List[tuple]:
        if isinstance(entity, (SimilarArtist, SimilarUser)):
            return [("Name", "white"), ("Match", "bold")]
        if isinstance(entity, Track):
            return [("Title", "white"), ("Artist", "green"), ("URL", "cyan")]
        if isinstance(entity, Artist):
            return [("Name", "white"), ("MBID", "dim"), ("Streamable", "yellow")]
        return [("Name", "white"), ("URL", "cyan")]

    def _row_for(self, entity: Any) -> List[Any]:
        if isinstance(entity, (SimilarArtist, SimilarUser)):
            return [entity.name, self.format_match(entity.match)]
        if isinstance(entity, Track):
            return [entity.title, entity.artist.name, entity.url or ""]
        if isinstance(entity, Artist):
            streamable = "-" if entity.streamable is None else ("yes" if entity.streamable else "no")
            return [entity.name, entity.mbid or "", streamable]
        if isinstance(entity, (Tag, User)):
            return [entity.name, entity.url or ""]
        return [str(entity), ""]
