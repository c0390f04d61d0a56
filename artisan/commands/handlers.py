"""Built-in artisan commands.

``build_registry`` wires every command the CLI understands into a fresh
``CommandRegistry``.  The ``make:*`` commands delegate to the
``ResourceGenerator``; the database, cache and optimisation commands only
acknowledge the request, there is no database or cache behind them.
"""

from __future__ import annotations

import secrets
from collections.abc import Sequence

from artisan.config import Config
from artisan.errors import UserInputError
from artisan.scaffolder import ArtifactKind, ResourceGenerator
from artisan.utils import (
    parse_flags,
    print_info,
    print_lines,
    print_success,
    print_table,
    run_command,
)

from .registry import NAME_WIDTH, Command, CommandRegistry, Handler

# Illustrative output of ``route:list``; not derived from the project.
SAMPLE_ROUTES: tuple[tuple[str, str], ...] = (
    ("GET", "/api/v1/users"),
    ("POST", "/api/v1/users"),
    ("GET", "/api/v1/users/:id"),
    ("PUT", "/api/v1/users/:id"),
    ("DELETE", "/api/v1/users/:id"),
)

_MAKE_DESCRIPTIONS: dict[ArtifactKind, str] = {
    ArtifactKind.CONTROLLER: "Create a new controller class",
    ArtifactKind.MODEL: "Create a new model class",
    ArtifactKind.SERVICE: "Create a new service class",
    ArtifactKind.VALIDATOR: "Create a new validator class",
    ArtifactKind.ROUTE: "Create a new route file",
    ArtifactKind.MIDDLEWARE: "Create a new middleware class",
    ArtifactKind.TEST: "Create a new test file",
    ArtifactKind.SEEDER: "Create a new seeder class",
    ArtifactKind.MIGRATION: "Create a new migration file",
}


def _first(args: Sequence[str]) -> str | None:
    return args[0] if args else None


class ArtisanCommands:
    """Handlers for the built-in commands.

    Attributes:
        config: Invocation configuration.
        registry: The registry the handlers are registered into; ``list``
            reads it back.
        generator: Artifact generator used by the ``make:*`` commands.
    """

    def __init__(
        self,
        config: Config,
        registry: CommandRegistry,
        generator: ResourceGenerator | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.generator = generator or ResourceGenerator(config)

    # ------------------------------------------------------------------
    # Make commands
    # ------------------------------------------------------------------

    def make_artifact(self, kind: ArtifactKind) -> Handler:
        """Return the handler for ``make:<kind>``."""

        async def handler(args: Sequence[str]) -> None:
            await self.generator.generate(kind, _first(args))

        return handler

    async def make_resource(self, args: Sequence[str]) -> None:
        await self.generator.generate_resource(_first(args))

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_commands(self, args: Sequence[str]) -> None:
        lines = ["Available commands:", ""]
        for command in self.registry.list_all():
            lines.append(f"  {command.name.ljust(NAME_WIDTH)} {command.description}")
            lines.append(f"    Usage: {command.usage}")
            lines.append("")
        print_lines(lines)

    async def list_routes(self, args: Sequence[str]) -> None:
        print_table(("Method", "Path"), SAMPLE_ROUTES, title="Registered Routes")

    # ------------------------------------------------------------------
    # Database commands
    # ------------------------------------------------------------------

    async def run_seeders(self, args: Sequence[str]) -> None:
        seeder = _first(args)
        print_info("Running database seeders...")
        if seeder:
            print_info(f"Running specific seeder: {seeder}")
        else:
            print_info("Running all seeders...")
        print_success("Seeders completed successfully!")

    async def run_migrations(self, args: Sequence[str]) -> None:
        print_info("Running database migrations...")
        print_success("Migrations completed successfully!")

    async def rollback_migrations(self, args: Sequence[str]) -> None:
        raw_steps = _first(args)
        try:
            steps = int(raw_steps) if raw_steps is not None else 1
        except ValueError:
            raise UserInputError(f"Invalid step count: {raw_steps!r}.") from None
        if steps < 1:
            raise UserInputError(f"Step count must be at least 1, got {steps}.")

        print_info(f"Rolling back {steps} migration(s)...")
        print_success("Rollback completed successfully!")

    # ------------------------------------------------------------------
    # Cache and config commands
    # ------------------------------------------------------------------

    async def clear_cache(self, args: Sequence[str]) -> None:
        print_info("Clearing application cache...")
        print_success("Cache cleared successfully!")

    async def clear_logs(self, args: Sequence[str]) -> None:
        print_info("Clearing application logs...")
        print_success("Logs cleared successfully!")

    async def cache_config(self, args: Sequence[str]) -> None:
        print_info("Caching configuration files...")
        print_success("Configuration cached successfully!")

    async def clear_config_cache(self, args: Sequence[str]) -> None:
        print_info("Clearing configuration cache...")
        print_success("Configuration cache cleared successfully!")

    # ------------------------------------------------------------------
    # Server and utility commands
    # ------------------------------------------------------------------

    async def serve(self, args: Sequence[str]) -> None:
        """Run the development server in the foreground until it exits."""
        flags = parse_flags(args)
        host = flags.get("host") or self.config.serve.host
        raw_port = flags.get("port")
        try:
            port = int(raw_port) if raw_port else self.config.serve.port
        except ValueError:
            raise UserInputError(f"Invalid port: {raw_port!r}.") from None
        if not 1 <= port <= 65535:
            raise UserInputError(f"Port must be between 1 and 65535, got {port}.")

        print_info(f"Starting development server on http://{host}:{port}")
        print_info("Press Ctrl+C to stop the server")

        returncode = await run_command(
            self.config.serve.dev_command,
            cwd=self.config.project_root,
            env={"HOST": host, "PORT": str(port)},
        )
        if returncode != 0:
            raise RuntimeError(f"Development server exited with code {returncode}")

    async def optimize(self, args: Sequence[str]) -> None:
        print_info("Optimizing application for production...")
        print_success("Application optimized successfully!")

    async def generate_key(self, args: Sequence[str]) -> None:
        print_info("Generating application key...")
        key = secrets.token_hex(self.config.key_bytes)
        print_success("Application key generated:")
        print_lines([key])
        print_info("Remember to add this to your .env file as APP_KEY")


# ---------------------------------------------------------------------------
# Registry construction
# ---------------------------------------------------------------------------


def build_registry(
    config: Config,
    generator: ResourceGenerator | None = None,
) -> CommandRegistry:
    """Return a registry populated with every built-in command."""
    registry = CommandRegistry()
    commands = ArtisanCommands(config, registry, generator)

    for kind, description in _MAKE_DESCRIPTIONS.items():
        registry.register(
            Command(
                name=f"make:{kind.value}",
                description=description,
                usage=f"make:{kind.value} <name>",
                handler=commands.make_artifact(kind),
            )
        )

    table: list[tuple[str, str, str, Handler]] = [
        (
            "make:resource",
            "Create a complete resource (controller, model, service, validator, route)",
            "make:resource <name>",
            commands.make_resource,
        ),
        ("list", "List all available commands", "list", commands.list_commands),
        ("clear:cache", "Clear application cache", "clear:cache", commands.clear_cache),
        ("clear:logs", "Clear application logs", "clear:logs", commands.clear_logs),
        ("route:list", "List all registered routes", "route:list", commands.list_routes),
        ("db:seed", "Run database seeders", "db:seed [seeder]", commands.run_seeders),
        ("db:migrate", "Run database migrations", "db:migrate", commands.run_migrations),
        (
            "db:rollback",
            "Rollback database migrations",
            "db:rollback [steps]",
            commands.rollback_migrations,
        ),
        (
            "serve",
            "Start the development server",
            f"serve [--port={config.serve.port}] [--host={config.serve.host}]",
            commands.serve,
        ),
        ("optimize", "Optimize the application for production", "optimize", commands.optimize),
        ("key:generate", "Generate application key", "key:generate", commands.generate_key),
        ("config:cache", "Cache configuration files", "config:cache", commands.cache_config),
        ("config:clear", "Clear configuration cache", "config:clear", commands.clear_config_cache),
    ]
    for name, description, usage, handler in table:
        registry.register(Command(name, description, usage, handler))

    return registry
