"""`eplite operations`: list the operation catalogue."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, ClassVar

from ..._operations import OPERATIONS
from ..base import Command
from ..display import ResultDisplay

if TYPE_CHECKING:
    from ..._client import EPLite


class OperationsCommand(Command):
    name = "operations"
    aliases: ClassVar[list[str]] = ["ops"]
    description = "List supported API operations"
    requires_client = False

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--mutating", action="store_true", help="Only show operations sent as POST"
        )

    def execute(self, args: Namespace, client: EPLite | None = None) -> int:
        operations = sorted(OPERATIONS.values(), key=lambda op: op.name)
        if args.mutating:
            operations = [op for op in operations if op.mutating]
        ResultDisplay().show_operations(operations)
        return 0
