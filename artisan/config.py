"""Artisan configuration.

Typed settings for a single CLI invocation.  All settings use Pydantic v2
models so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ServeConfig(BaseModel):
    """Defaults for the ``serve`` command."""

    host: str = Field(default="localhost")
    port: int = Field(default=3000, ge=1, le=65535)
    dev_command: str = Field(
        default="npm run dev",
        description="Foreground command that starts the development server",
    )


class Config(BaseModel):
    """Global artisan configuration.

    Instances are created once by the CLI entry point and passed to the
    command handlers.  Generated files are written relative to
    ``project_root``.
    """

    project_root: Path = Field(default=Path("."))
    template_dir: Path | None = Field(
        default=None,
        description="Directory whose templates take precedence over the bundled ones",
    )
    serve: ServeConfig = Field(default_factory=ServeConfig)
    key_bytes: int = Field(default=32, ge=16, description="Random bytes in key:generate output")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def templates_override_path(self) -> Path:
        """Project-local template directory searched before the bundled set."""
        if self.template_dir is not None:
            return self.template_dir
        return self.project_root / ".artisan" / "templates"

    def artifact_path(self, relative: str | Path) -> Path:
        """Resolve a path inside the project root."""
        return self.project_root / relative

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ARTISAN_PROJECT_ROOT, ARTISAN_TEMPLATE_DIR,
            ARTISAN_HOST, ARTISAN_PORT, ARTISAN_DEV_COMMAND.
        """
        serve_kwargs: dict[str, Any] = {}
        if os.environ.get("ARTISAN_HOST"):
            serve_kwargs["host"] = os.environ["ARTISAN_HOST"]
        if os.environ.get("ARTISAN_PORT"):
            serve_kwargs["port"] = int(os.environ["ARTISAN_PORT"])
        if os.environ.get("ARTISAN_DEV_COMMAND"):
            serve_kwargs["dev_command"] = os.environ["ARTISAN_DEV_COMMAND"]

        template_dir = os.environ.get("ARTISAN_TEMPLATE_DIR")

        return cls(
            project_root=Path(os.environ.get("ARTISAN_PROJECT_ROOT", ".")),
            template_dir=Path(template_dir) if template_dir else None,
            serve=ServeConfig(**serve_kwargs),
        )
