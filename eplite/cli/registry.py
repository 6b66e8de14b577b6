"""
Command registry for automatic command discovery and registration.
"""

import importlib
import inspect

from .base import Command, CommandGroup

COMMAND_MODULES = ("call", "operations", "check", "pad")


class CommandRegistry:
    """Registry of top-level CLI commands, keyed by name and alias."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register_command(self, command: Command) -> None:
        if not isinstance(command, Command):
            raise TypeError(f"Expected Command instance, got {type(command)}")

        for name in command.get_all_names():
            if name in self._commands:
                raise ValueError(f"Command '{name}' is already registered")
            self._commands[name] = command

    def discover_commands_from_module(self, module_name: str) -> None:
        """
        Register every top-level command class defined in ``module_name``.

        Classes marked ``subcommand = True`` are left to their parent group.
        """
        module = importlib.import_module(module_name)
        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, Command)
                and obj not in (Command, CommandGroup)
                and obj.__module__ == module.__name__
                and not inspect.isabstract(obj)
                and not getattr(obj, "subcommand", False)
            ):
                self.register_command(obj())

    def auto_discover_commands(self, package_name: str = "eplite.cli.commands") -> None:
        for module in COMMAND_MODULES:
            self.discover_commands_from_module(f"{package_name}.{module}")

    def get_command(self, name: str) -> Command:
        """
        Get a registered command by name or alias.

        Raises:
            KeyError: If command is not found
        """
        if name not in self._commands:
            raise KeyError(f"Command '{name}' not found")
        return self._commands[name]

    def get_primary_commands(self) -> list[Command]:
        """Unique command instances, in registration order, excluding aliases."""
        return [command for name, command in self._commands.items() if name == command.name]

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def clear(self) -> None:
        self._commands.clear()


# Global command registry instance
registry = CommandRegistry()
