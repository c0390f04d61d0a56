"""Jinja2 template rendering for artifact generation.

Provides the TemplateRenderer class which loads Jinja2 templates from a
project-local override directory first and from the templates bundled with
this package second, then renders them with a naming context.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from artisan.naming import title_case, to_camel_case, to_kebab_case, to_snake_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderError(RuntimeError):
    """Raised when a template is missing or fails to render."""

    def __init__(self, template_path: str, message: str) -> None:
        self.template_path = template_path
        super().__init__(f"{template_path}: {message}")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for artifact generation.

    Templates are looked up in each directory of *search_path* in order, so a
    project can shadow a bundled template by placing a file with the same
    relative name in its override directory.  The bundled directory is always
    searched last.
    """

    def __init__(self, search_path: Iterable[str | Path] | None = None) -> None:
        directories = [Path(p) for p in (search_path or [])]
        if _DEFAULT_TEMPLATE_DIR not in directories:
            directories.append(_DEFAULT_TEMPLATE_DIR)
        self.search_path = directories
        self.env = Environment(
            loader=ChoiceLoader(
                [FileSystemLoader(str(directory)) for directory in directories]
            ),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["title_case"] = title_case
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["kebab_case"] = to_kebab_case
        self.env.filters["snake_case"] = to_snake_case

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to a template directory (e.g.
                ``"app/controllers/starter.controller.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Raises:
            TemplateRenderError: The template does not exist, has a syntax
                error, or raised while rendering.
        """
        try:
            template = self.env.get_template(template_path)
            return template.render(**context)
        except TemplateNotFound as exc:
            raise TemplateRenderError(template_path, f"template not found ({exc.name})") from exc
        except TemplateError as exc:
            raise TemplateRenderError(template_path, str(exc)) from exc
        except Exception as exc:
            # Raised by template expressions or an undecodable override file.
            raise TemplateRenderError(template_path, f"{type(exc).__name__}: {exc}") from exc

    async def render_async(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* in a worker thread."""
        return await asyncio.to_thread(self.render, template_path, context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return every ``.j2`` template visible through the search path."""
        return sorted(
            name for name in self.env.list_templates() if name.endswith(".j2")
        )
