"""Console reporter: FilterResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from params_filter.application.normalizer import preview

if TYPE_CHECKING:
    from params_filter.domain.model.filter_result import FilterResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Rule title printed above the result. None = no rule.
        show_message: Show status message lines.
        sort_fields: Sort admitted fields by name instead of output order.
        width: Console width in characters.
    """

    title: str | None = None
    show_message: bool = True
    sort_fields: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: FilterResult) -> str:
        """Format filter result as rich formatted string.

        Args:
            result: Filter result to format.

        Returns:
            Formatted string with status and admitted fields table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        if self._config.title is not None:
            console.rule(f"[bold]{self._config.title}[/bold]")

        if result.record is None:
            console.print(f"[bold red]REJECTED[/bold red] ({result.failure.name})")
        else:
            console.print(f"[bold green]ADMITTED[/bold green] ({len(result.record)} fields)")
            self._render_fields(console, result.record)

        if self._config.show_message:
            for line in result.message.splitlines():
                console.print(f"  [dim]{escape(line)}[/dim]")

        return output.getvalue()

    def _render_fields(self, console: Console, record: dict[object, object]) -> None:
        """Render admitted fields as name/value table."""
        if not record:
            return

        names = list(record)
        if self._config.sort_fields:
            names.sort(key=str)

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for name in names:
            table.add_row(escape(str(name)), escape(preview(record[name])))
        console.print(table)
