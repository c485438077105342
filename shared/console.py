"""
Console Interface
==================

Rich-powered presentation layer for the hillplayfair commands: the
banner, stage headers, status lines, grids, and the diagnostics table.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_TOOL_THEME = Theme(
    {
        "tool.banner": "bold bright_cyan",
        "tool.section": "bold bright_magenta",
        "tool.success": "bold green",
        "tool.error": "bold red",
        "tool.dim": "dim white",
        "sev.high": "bold red",
        "sev.medium": "bold yellow",
        "sev.low": "bold bright_cyan",
        "sev.info": "bold bright_blue",
    }
)

# status kind -> (theme style, marker)
_STATUS: dict[str, tuple[str, str]] = {
    "success": ("tool.success", "[✔] SUCCESS:"),
    "error": ("tool.error", "[✘] ERROR:"),
}


def _styled_table(title: str, *, show_header: bool = True, caption: str | None = None) -> Table:
    return Table(
        title=title,
        caption=caption,
        border_style="bright_cyan",
        header_style="bold bright_magenta",
        show_header=show_header,
        show_lines=True,
        padding=(0, 1),
    )


class ToolConsole:
    """Console used by every hillplayfair command.

    ``quiet=True`` silences all output; the CLI sets it for ``-q``.
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self._console = Console(theme=_TOOL_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        body = Text.assemble(
            ("HILLPLAYFAIR\n", "tool.banner"),
            ("Hill cipher, then Playfair cipher\n", "bold bright_white"),
            (f"Version: {version}", "tool.dim"),
        )
        self._console.print(Panel(Align.center(body), border_style="bright_cyan", padding=(1, 2)))

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="tool.section")
        self._console.print()

    def _status(self, kind: str, message: str) -> None:
        style, marker = _STATUS[kind]
        self._console.print(Text.assemble((marker, style), " ", message))

    def success(self, message: str) -> None:
        self._status("success", message)

    def error(self, message: str) -> None:
        self._status("error", message)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        show_header: bool = True,
    ) -> None:
        """Print *rows* as a centred grid; cells are stringified."""
        tbl = _styled_table(title, show_header=show_header, caption=caption)
        for name in columns:
            tbl.add_column(name, justify="center")
        for row in rows:
            tbl.add_row(*map(str, row))
        self._console.print(tbl)

    def diagnostics_table(self, diagnostics: Sequence[Any]) -> None:
        """Print :class:`shared.models.Diagnostic` objects coloured by severity."""
        if not diagnostics:
            self.success("No diagnostics recorded.")
            return

        tbl = _styled_table("Diagnostics")
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=12)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)
        for idx, diagnostic in enumerate(diagnostics, start=1):
            name = diagnostic.severity.value
            tbl.add_row(
                str(idx),
                Text(name, style=f"sev.{name.lower()}"),
                diagnostic.title,
                diagnostic.description,
            )
        self._console.print(tbl)
