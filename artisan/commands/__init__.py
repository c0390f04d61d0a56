"""Command layer -- registry, built-in handlers and the dispatcher."""

from artisan.commands.dispatcher import COMMAND_FAILED, COMMAND_NOT_FOUND, OK, Dispatcher
from artisan.commands.handlers import ArtisanCommands, build_registry
from artisan.commands.registry import CATEGORIES, Command, CommandRegistry

__all__ = [
    "CATEGORIES",
    "COMMAND_FAILED",
    "COMMAND_NOT_FOUND",
    "OK",
    "ArtisanCommands",
    "Command",
    "CommandRegistry",
    "Dispatcher",
    "build_registry",
]
