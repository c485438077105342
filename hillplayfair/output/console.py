"""
Console Output
===============

Rich-based display of pipeline runs: text artifacts in panels, the key
matrix and Playfair table as grids, digraph rule counts, and the
diagnostics table.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ToolConsole
from hillplayfair.core.models import PipelineTrace, PlayfairTable
from hillplayfair.output.report import wrap_letters

_RULE_LABELS: dict[str, str] = {
    "same_row": "Same row (shift right)",
    "same_column": "Same column (shift down)",
    "rectangle": "Rectangle (swap columns)",
}


class PipelineConsoleOutput:
    """Console formatters for pipeline traces.

    Usage::

        output = PipelineConsoleOutput(ToolConsole())
        output.display_trace(trace)
        output.display_table(table, keyword="MONARCHY")
    """

    def __init__(
        self,
        console: Optional[ToolConsole] = None,
        wrap_width: int = 80,
    ) -> None:
        self.console = console or ToolConsole()
        self.wrap_width = wrap_width
        self._rich = self.console.rich

    def display_trace(self, trace: PipelineTrace) -> None:
        """Display every artifact of *trace* in pipeline order."""
        self.console.section("Hill Cipher")
        self._letters_panel("Preprocessed Plaintext", trace.normalized_plaintext)
        self.display_key(trace)
        self._letters_panel("Padded Hill Cipher Plaintext", trace.padded_plaintext)
        self._letters_panel("Ciphertext after Hill Cipher", trace.hill_ciphertext, "bright_green")

        self.console.section("Playfair Cipher")
        self.display_table(trace.table, keyword=trace.sanitized_keyword)
        self._letters_panel("Playfair Digraphs", " ".join(trace.digraphs))
        self._display_rule_counts(trace.rule_counts)
        self._letters_panel("Ciphertext after Playfair", trace.playfair_ciphertext, "bold bright_green")

        self.console.diagnostics_table(trace.diagnostics)

    def display_key(self, trace: PipelineTrace) -> None:
        """Show the key matrix as a grid titled with its dimension."""
        n = trace.key_dimension
        self.console.table(
            f"Hill Cipher Key Matrix ({n}x{n})",
            [f"c{j}" for j in range(n)],
            trace.key.rows,
            show_header=False,
        )

    def display_table(self, table: PlayfairTable, keyword: str = "") -> None:
        """Show the 5x5 Playfair table, highlighting keyword letters."""
        grid = Table(
            title=f"Playfair Table (keyword: {keyword or '<empty>'})",
            border_style="bright_cyan",
            show_header=False,
            show_lines=True,
        )
        for _ in range(5):
            grid.add_column(justify="center", width=3)

        keyword_letters = set(keyword)
        for row in table.rows:
            grid.add_row(*(
                Text(letter, style="bold bright_magenta" if letter in keyword_letters else "")
                for letter in row
            ))
        self._rich.print(grid)

    def _display_rule_counts(self, rule_counts: dict[str, int]) -> None:
        rows = [(_RULE_LABELS.get(rule, rule), count) for rule, count in rule_counts.items()]
        self.console.table("Digraph Rules", ["Rule", "Digraphs"], rows)

    def _letters_panel(self, title: str, letters: str, style: str = "") -> None:
        body = Text(wrap_letters(letters, self.wrap_width) or "<empty>", style=style)
        self._rich.print(Panel(body, title=title, border_style="cyan", expand=False))
