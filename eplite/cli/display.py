"""
Terminal rendering for CLI results.

Operation data is shown as highlighted JSON, or raw JSON for scripting.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .._exceptions import EPLiteError
from .._operations import Operation


class ResultDisplay:
    """Render operation results and errors to a rich console."""

    def __init__(self, console: Console | None = None, raw: bool = False) -> None:
        self.console = console or Console()
        self.raw = raw

    def show_data(self, data: Any) -> None:
        if self.raw:
            # Plain print keeps the output pipeable (no markup, no wrapping)
            self.console.print(json.dumps(data, ensure_ascii=False), markup=False, soft_wrap=True)
        elif data is None:
            self.console.print("[green]ok[/green]")
        elif isinstance(data, str):
            self.console.print(data, markup=False, highlight=False)
        else:
            self.console.print_json(data=data)

    def show_error(self, error: EPLiteError) -> None:
        kind = type(error).__name__
        code = f" (code {error.code})" if error.code is not None else ""
        self.console.print(
            f"[bold red]{kind}{code}:[/bold red] {escape(error.message)}", highlight=False
        )

    def show_operations(self, operations: list[Operation]) -> None:
        table = Table(title="Etherpad API operations")
        table.add_column("Operation", style="cyan", no_wrap=True)
        table.add_column("Verb")
        table.add_column("Required")
        table.add_column("Optional", style="dim")
        for op in operations:
            verb = "POST" if op.mutating else "GET"
            if op.name == "createAuthor":
                verb = "GET/POST"
            table.add_row(op.name, verb, ", ".join(op.required), ", ".join(op.optional))
        self.console.print(table)
