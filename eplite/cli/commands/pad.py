"""`eplite pad ...`: shortcuts for common pad operations."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, ClassVar

from ..._exceptions import EPLiteError
from ..base import Command, CommandGroup
from ..display import ResultDisplay

if TYPE_CHECKING:
    from ..._client import EPLite


class PadCommandGroup(CommandGroup):
    name = "pad"
    description = "Work with pads"

    def __init__(self) -> None:
        super().__init__()
        self.add_subcommand(CreatePadCommand())
        self.add_subcommand(TextCommand())
        self.add_subcommand(AppendCommand())
        self.add_subcommand(DeletePadCommand())


class _PadCommand(Command):
    """Shared error handling for pad subcommands."""

    name = "_pad"
    description = "pad subcommand"
    subcommand = True

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument("pad_id", help="Pad ID")

    def execute(self, args: Namespace, client: EPLite | None = None) -> int:
        display = ResultDisplay()
        try:
            result = self.run(args, client)
        except EPLiteError as e:
            display.show_error(e)
            return 1
        display.show_data(result)
        return 0

    def run(self, args: Namespace, client: EPLite) -> object:
        raise NotImplementedError


class CreatePadCommand(_PadCommand):
    name = "create"
    description = "Create a pad"

    def add_arguments(self, parser: ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("--text", help="Initial text")

    def run(self, args: Namespace, client: EPLite) -> object:
        client.pads.create(args.pad_id, text=args.text)
        return None


class TextCommand(_PadCommand):
    name = "text"
    aliases: ClassVar[list[str]] = ["cat"]
    description = "Print a pad's text"

    def add_arguments(self, parser: ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("--rev", type=int, help="Revision number (default: latest)")

    def run(self, args: Namespace, client: EPLite) -> object:
        return client.pads.get_text(args.pad_id, rev=args.rev)


class AppendCommand(_PadCommand):
    name = "append"
    description = "Append text to a pad"

    def add_arguments(self, parser: ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("text", help="Text to append")

    def run(self, args: Namespace, client: EPLite) -> object:
        client.pads.append_text(args.pad_id, args.text)
        return None


class DeletePadCommand(_PadCommand):
    name = "delete"
    aliases: ClassVar[list[str]] = ["rm"]
    description = "Delete a pad"

    def run(self, args: Namespace, client: EPLite) -> object:
        client.pads.delete(args.pad_id)
        return None
