"""`eplite check`: verify the API key against the server."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING

from ..._exceptions import EPLiteError
from ..base import Command
from ..display import ResultDisplay

if TYPE_CHECKING:
    from ..._client import EPLite


class CheckCommand(Command):
    name = "check"
    description = "Check that the server accepts the API key"

    def add_arguments(self, parser: ArgumentParser) -> None:
        pass

    def execute(self, args: Namespace, client: EPLite | None = None) -> int:
        display = ResultDisplay()
        endpoint = client.endpoint
        secure = "yes" if client.is_secure else "no"
        display.console.print(
            f"Endpoint: {endpoint.base_url} (API {endpoint.api_version}, secure port: {secure})",
            highlight=False,
        )
        try:
            client.check_token()
        except EPLiteError as e:
            display.show_error(e)
            return 1
        display.console.print("[green]API key accepted[/green]")
        return 0
