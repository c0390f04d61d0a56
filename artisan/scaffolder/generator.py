"""Artifact generation orchestrator.

Takes a raw resource name, derives its ``NamingContext`` and renders one or
more artifact templates into the project tree.  Every artifact is attempted
exactly once and independently: a render or write failure is reported and
recorded, and the remaining artifacts of a batch are still generated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from artisan.config import Config
from artisan.errors import UserInputError
from artisan.naming import NamingContext, migration_timestamp
from artisan.utils import print_error, print_info, print_success, print_warning

from .artifacts import ARTIFACTS, RESOURCE_KINDS, ArtifactKind, ArtifactSpec
from .templates import TemplateRenderer, TemplateRenderError
from .writer import FileWriteError, FileWriter


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class GenerationResult:
    """Outcome of one artifact generation attempt."""

    kind: ArtifactKind
    output_path: Path
    succeeded: bool
    error: str | None = None


@dataclass
class ResourceBatch:
    """Outcome of a ``make:resource`` run."""

    name: str
    naming: NamingContext
    results: list[GenerationResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(result.succeeded for result in self.results)

    @property
    def failed(self) -> list[GenerationResult]:
        return [result for result in self.results if not result.succeeded]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ResourceGenerator:
    """Renders artifact templates for a resource name.

    Args:
        config: Invocation configuration; ``project_root`` anchors every
            output path and ``templates_override_path`` shadows the bundled
            templates.
        renderer: Template renderer.  Built from *config* when omitted.
        writer: File writer.  A default ``FileWriter`` when omitted.
        clock: Returns the current time; used for migration timestamps.
    """

    def __init__(
        self,
        config: Config,
        renderer: TemplateRenderer | None = None,
        writer: FileWriter | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer([config.templates_override_path])
        self.writer = writer or FileWriter()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    # -- Public API --------------------------------------------------------

    async def generate(self, kind: ArtifactKind | str, raw: str | None) -> GenerationResult:
        """Generate a single artifact of *kind* for *raw*.

        Raises:
            UserInputError: *raw* is missing or blank.  Nothing is written.
        """
        spec = ARTIFACTS[ArtifactKind(kind)]
        name = _require_name(raw, spec.label)
        return await self._generate(spec, self._naming_for(spec, name))

    async def generate_resource(self, raw: str | None) -> ResourceBatch:
        """Generate controller, model, service, validator and route for *raw*.

        The artifacts are produced one after another in that fixed order.
        A failing artifact does not stop the ones after it.

        Raises:
            UserInputError: *raw* is missing or blank.  Nothing is written.
        """
        name = _require_name(raw, "Resource")
        naming = NamingContext.from_raw(name)
        batch = ResourceBatch(name=name, naming=naming)

        print_info(f"Creating resource: {name}")
        for kind in RESOURCE_KINDS:
            spec = ARTIFACTS[kind]
            batch.results.append(await self._generate(spec, self._naming_for(spec, name)))

        if batch.succeeded:
            print_success(f'Resource "{name}" created successfully!')
        else:
            print_warning(
                f'Resource "{name}" created with {len(batch.failed)} error(s).'
            )
        return batch

    # -- Internals ---------------------------------------------------------

    def _naming_for(self, spec: ArtifactSpec, name: str) -> NamingContext:
        timestamp = migration_timestamp(self.clock()) if spec.timestamped else None
        return NamingContext.from_raw(name, timestamp=timestamp)

    async def _generate(self, spec: ArtifactSpec, naming: NamingContext) -> GenerationResult:
        output_path = self.config.artifact_path(spec.output_path(naming))
        try:
            content = await self.renderer.render_async(
                spec.template_path, naming.template_context()
            )
            await self.writer.ensure_dir(output_path.parent)
            await self.writer.write(output_path, content, label=spec.label)
        except (TemplateRenderError, FileWriteError) as exc:
            print_error(f"Error creating {spec.kind.value}: {exc}")
            return GenerationResult(spec.kind, output_path, succeeded=False, error=str(exc))

        return GenerationResult(spec.kind, output_path, succeeded=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_name(raw: str | None, label: str) -> str:
    """Return *raw* stripped, or raise if there is nothing left."""
    name = (raw or "").strip()
    if not name:
        raise UserInputError(f"{label} name is required.")
    return name
