"""Built-in table of generatable artifacts.

Each ``ArtifactSpec`` ties an artifact kind to the template it is rendered
from and the project directory it is written to.  The table is fixed; output
paths depend only on the kind and the naming context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from artisan.naming import NamingContext


class ArtifactKind(str, Enum):
    """Kinds of source file the generator can emit."""

    CONTROLLER = "controller"
    MODEL = "model"
    SERVICE = "service"
    VALIDATOR = "validator"
    ROUTE = "route"
    MIDDLEWARE = "middleware"
    TEST = "test"
    SEEDER = "seeder"
    MIGRATION = "migration"


@dataclass(frozen=True)
class ArtifactSpec:
    """Where an artifact kind comes from and where it goes."""

    kind: ArtifactKind
    template_path: str
    output_dir: str
    extension: str = ".ts"

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Controller"``."""
        return self.kind.value.capitalize()

    @property
    def timestamped(self) -> bool:
        """Whether file names carry a migration timestamp prefix."""
        return self.kind is ArtifactKind.MIGRATION

    def file_name(self, naming: NamingContext) -> str:
        stem = naming.class_name_lower_case
        if self.timestamped:
            if not naming.timestamp:
                raise ValueError(f"{self.label} file names require a timestamp")
            return f"{naming.timestamp}_{stem}{self.extension}"
        return f"{stem}.{self.kind.value}{self.extension}"

    def output_path(self, naming: NamingContext, root: str | Path = ".") -> Path:
        """Return the file this artifact is written to under *root*."""
        return Path(root) / self.output_dir / self.file_name(naming)


ARTIFACTS: dict[ArtifactKind, ArtifactSpec] = {
    spec.kind: spec
    for spec in (
        ArtifactSpec(
            ArtifactKind.CONTROLLER,
            "app/controllers/starter.controller.ts.j2",
            "src/app/controllers",
        ),
        ArtifactSpec(
            ArtifactKind.MODEL,
            "app/models/starter.model.ts.j2",
            "src/app/models",
        ),
        ArtifactSpec(
            ArtifactKind.SERVICE,
            "app/services/starter.service.ts.j2",
            "src/app/services",
        ),
        ArtifactSpec(
            ArtifactKind.VALIDATOR,
            "app/validators/starter.validator.ts.j2",
            "src/app/validators",
        ),
        ArtifactSpec(
            ArtifactKind.ROUTE,
            "routes/starter.route.ts.j2",
            "src/routes",
        ),
        ArtifactSpec(
            ArtifactKind.MIDDLEWARE,
            "app/middlewares/starter.middleware.ts.j2",
            "src/app/middlewares",
        ),
        ArtifactSpec(
            ArtifactKind.TEST,
            "tests/starter.test.ts.j2",
            "src/tests",
        ),
        ArtifactSpec(
            ArtifactKind.SEEDER,
            "database/seeders/starter.seeder.ts.j2",
            "src/database/seeders",
        ),
        ArtifactSpec(
            ArtifactKind.MIGRATION,
            "database/migrations/starter.migration.ts.j2",
            "src/database/migrations",
        ),
    )
}

# Artifacts emitted by ``make:resource``, in generation order.
RESOURCE_KINDS: tuple[ArtifactKind, ...] = (
    ArtifactKind.CONTROLLER,
    ArtifactKind.MODEL,
    ArtifactKind.SERVICE,
    ArtifactKind.VALIDATOR,
    ArtifactKind.ROUTE,
)
