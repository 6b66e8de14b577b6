"""`eplite call`: invoke any catalogued operation by name."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, ClassVar

from rich.markup import escape

from ..._exceptions import EPLiteError
from ..base import Command
from ..display import ResultDisplay
from ..util import parse_params

if TYPE_CHECKING:
    from ..._client import EPLite


class CallCommand(Command):
    """Invoke an API operation with name=value parameters."""

    name = "call"
    aliases: ClassVar[list[str]] = ["c"]
    description = "Invoke an API operation, e.g. 'call getText padID=notes'"

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("operation", help="Operation name, e.g. getText")
        parser.add_argument("params", nargs="*", metavar="name=value", help="Operation parameters")
        parser.add_argument("--json", action="store_true", help="Print raw JSON data")

    def execute(self, args: Namespace, client: EPLite | None = None) -> int:
        display = ResultDisplay(raw=args.json)
        try:
            params = parse_params(args.params)
        except ValueError as e:
            display.console.print(
                f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False
            )
            return 2
        try:
            data = client.call(args.operation, **params)
        except EPLiteError as e:
            display.show_error(e)
            return 1
        display.show_data(data)
        return 0
