"""
Two-column console reports for appmanifest.
"""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text


class TwoColumnReport:
    """A titled report of label/value rows rendered as a rich table."""

    def __init__(self, title: str):
        self.title = title
        self.rows: List[Tuple[str, str]] = []

    def add(self, label: str, value: Optional[str]) -> None:
        self.rows.append((label, value or ""))

    def write(self, console: Console) -> None:
        # title stays on one line, unwrapped
        console.print(Text(self.title, style="italic"), soft_wrap=True)

        table = Table(show_header=False)
        table.add_column("Label", style="bold", no_wrap=True)
        table.add_column("Value", overflow="fold")

        for label, value in self.rows:
            table.add_row(Text(label), Text(value))
        console.print(table)
