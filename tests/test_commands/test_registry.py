"""Tests for CommandRegistry.

Covers:
- register / lookup, last registration wins
- list_all is lazy and insertion ordered
- list_by_category uses the static table only
- help_lines alignment
"""

from __future__ import annotations

import types

import pytest

from artisan.commands.registry import CATEGORIES, NAME_WIDTH, Command, CommandRegistry

pytestmark = pytest.mark.unit


async def _noop(args) -> None:
    return None


def _command(name: str, description: str = "does a thing") -> Command:
    return Command(name=name, description=description, usage=name, handler=_noop)


class TestRegisterLookup:
    def test_lookup_registered(self):
        registry = CommandRegistry()
        command = _command("make:model")
        registry.register(command)
        assert registry.lookup("make:model") is command

    def test_lookup_missing(self):
        assert CommandRegistry().lookup("foo:bar") is None

    def test_lookup_is_exact(self):
        registry = CommandRegistry()
        registry.register(_command("make:model"))
        assert registry.lookup("make:Model") is None
        assert registry.lookup("make") is None

    def test_last_registration_wins(self):
        registry = CommandRegistry()
        registry.register(_command("serve", "first"))
        registry.register(_command("serve", "second"))
        assert registry.lookup("serve").description == "second"
        assert len(registry) == 1

    def test_contains(self):
        registry = CommandRegistry()
        registry.register(_command("list"))
        assert "list" in registry
        assert "nope" not in registry

    def test_command_is_immutable(self):
        command = _command("list")
        with pytest.raises(AttributeError):
            command.name = "other"


class TestListing:
    def test_list_all_is_lazy(self):
        assert isinstance(CommandRegistry().list_all(), types.GeneratorType)

    def test_list_all_insertion_order(self):
        registry = CommandRegistry()
        for name in ("zeta", "alpha", "mid"):
            registry.register(_command(name))
        assert [c.name for c in registry.list_all()] == ["zeta", "alpha", "mid"]

    def test_overwrite_keeps_original_position(self):
        registry = CommandRegistry()
        registry.register(_command("a"))
        registry.register(_command("b"))
        registry.register(_command("a", "again"))
        assert [c.name for c in registry.list_all()] == ["a", "b"]

    def test_categories_follow_static_table(self):
        registry = CommandRegistry()
        registry.register(_command("db:migrate"))
        registry.register(_command("make:model"))
        registry.register(_command("make:controller"))

        grouped = registry.list_by_category()

        assert list(grouped) == ["Make", "Database"]
        assert [c.name for c in grouped["Make"]] == ["make:controller", "make:model"]

    def test_uncategorized_command_excluded_but_listed(self):
        registry = CommandRegistry()
        registry.register(_command("make:widget"))
        registry.register(_command("list"))

        grouped = registry.list_by_category()

        assert all("make:widget" not in [c.name for c in cmds] for cmds in grouped.values())
        assert "make:widget" in [c.name for c in registry.list_all()]
        assert registry.lookup("make:widget") is not None

    def test_every_category_present(self):
        assert list(CATEGORIES) == ["Make", "Database", "Route", "Cache", "Server", "Utility"]


class TestHelpLines:
    def test_alignment(self):
        registry = CommandRegistry()
        registry.register(_command("make:model", "Create a new model class"))
        registry.register(_command("serve", "Start the development server"))

        lines = registry.help_lines()

        assert lines == [
            "  Make Commands:",
            "    " + "make:model".ljust(NAME_WIDTH) + " Create a new model class",
            "",
            "  Server Commands:",
            "    " + "serve".ljust(NAME_WIDTH) + " Start the development server",
            "",
        ]

    def test_descriptions_start_in_same_column(self):
        registry = CommandRegistry()
        registry.register(_command("list", "short"))
        registry.register(_command("key:generate", "long"))
        rows = [line for line in registry.help_lines() if line.startswith("    ")]
        columns = {row.index(row.split()[-1]) for row in rows}
        assert columns == {4 + NAME_WIDTH + 1}

    def test_empty_registry(self):
        assert CommandRegistry().help_lines() == []
