"""Command dispatcher.

Resolves the first command-line token against a ``CommandRegistry`` and runs
the matching handler.  Handler failures are reported and turned into a
non-zero status for that command; they never propagate out of
:meth:`Dispatcher.dispatch`.
"""

from __future__ import annotations

from collections.abc import Sequence

from artisan.errors import UserInputError
from artisan.utils import print_error, print_info, print_lines

from .registry import CommandRegistry

# Dispatch statuses.
OK = 0
COMMAND_FAILED = 1
COMMAND_NOT_FOUND = 2


class Dispatcher:
    """Runs commands from a registry.

    Args:
        registry: Commands available to this invocation.
        program: Name shown in help and hints.
    """

    def __init__(self, registry: CommandRegistry, program: str = "artisan") -> None:
        self.registry = registry
        self.program = program

    async def dispatch(self, argv: Sequence[str]) -> int:
        """Run the command named by ``argv[0]`` with the remaining tokens.

        Returns:
            ``OK`` on success or when help was shown, ``COMMAND_NOT_FOUND``
            for an unknown name, ``COMMAND_FAILED`` when the handler raised.
        """
        if not argv:
            self.show_help()
            return OK

        name, args = argv[0], list(argv[1:])
        command = self.registry.lookup(name)
        if command is None:
            print_error(f'Command "{name}" not found.')
            print_info(f"Run '{self.program} list' to see all available commands.")
            return COMMAND_NOT_FOUND

        try:
            await command.handler(args)
        except UserInputError as exc:
            print_error(str(exc))
            print_info(f"Usage: {self.program} {command.usage}")
            return COMMAND_FAILED
        except Exception as exc:
            print_error(f'Error executing command "{name}": {exc}')
            return COMMAND_FAILED

        return OK

    def show_help(self) -> None:
        """Print the banner and the categorized command list."""
        print_lines(
            [
                f"{self.program} - code generation command line interface",
                "",
                f"Usage: {self.program} <command> [arguments]",
                "",
                "Available commands:",
                "",
                *self.registry.help_lines(),
            ]
        )
