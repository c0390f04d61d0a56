"""Command registry.

Maps command names to their handlers and metadata.  A registry is built once
per CLI invocation, populated by explicit ``register`` calls and discarded
when the invocation ends.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Sequence
from dataclasses import dataclass

Handler = Callable[[Sequence[str]], Awaitable[None]]

# Column width of command names in help and list output.
NAME_WIDTH = 20

# Static help grouping.  Commands absent from this table are still reachable
# and listed by ``list``, they just do not appear in the categorized help.
CATEGORIES: dict[str, tuple[str, ...]] = {
    "Make": (
        "make:controller",
        "make:model",
        "make:service",
        "make:validator",
        "make:route",
        "make:middleware",
        "make:test",
        "make:seeder",
        "make:migration",
        "make:resource",
    ),
    "Database": ("db:seed", "db:migrate", "db:rollback"),
    "Route": ("route:list",),
    "Cache": ("clear:cache", "clear:logs", "config:cache", "config:clear"),
    "Server": ("serve",),
    "Utility": ("list", "optimize", "key:generate"),
}


@dataclass(frozen=True)
class Command:
    """A named CLI command."""

    name: str
    description: str
    usage: str
    handler: Handler


class CommandRegistry:
    """Holds the commands available to one CLI invocation."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Add *command*, replacing any earlier command with the same name."""
        self._commands[command.name] = command

    def lookup(self, name: str) -> Command | None:
        """Return the command registered under *name*, or ``None``."""
        return self._commands.get(name)

    def list_all(self) -> Iterator[Command]:
        """Yield every command in registration order."""
        yield from self._commands.values()

    def list_by_category(self) -> dict[str, list[Command]]:
        """Group registered commands by the static ``CATEGORIES`` table."""
        grouped: dict[str, list[Command]] = {}
        for category, names in CATEGORIES.items():
            commands = [self._commands[name] for name in names if name in self._commands]
            if commands:
                grouped[category] = commands
        return grouped

    def help_lines(self) -> list[str]:
        """Render the categorized help as aligned text lines."""
        lines: list[str] = []
        for category, commands in self.list_by_category().items():
            lines.append(f"  {category} Commands:")
            for command in commands:
                lines.append(f"    {command.name.ljust(NAME_WIDTH)} {command.description}")
            lines.append("")
        return lines

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
