"""Artisan scaffolder -- renders source artifacts for a resource name.

Quick usage::

    from artisan.config import Config
    from artisan.scaffolder import ArtifactKind, ResourceGenerator

    generator = ResourceGenerator(Config(project_root=Path("./my-app")))
    result = await generator.generate(ArtifactKind.CONTROLLER, "Post")
    batch = await generator.generate_resource("Comment")
"""

from artisan.scaffolder.artifacts import ARTIFACTS, RESOURCE_KINDS, ArtifactKind, ArtifactSpec
from artisan.scaffolder.generator import GenerationResult, ResourceBatch, ResourceGenerator
from artisan.scaffolder.templates import TemplateRenderer, TemplateRenderError
from artisan.scaffolder.writer import FileWriteError, FileWriter

__all__ = [
    "ARTIFACTS",
    "RESOURCE_KINDS",
    "ArtifactKind",
    "ArtifactSpec",
    "FileWriteError",
    "FileWriter",
    "GenerationResult",
    "ResourceBatch",
    "ResourceGenerator",
    "TemplateRenderError",
    "TemplateRenderer",
]
