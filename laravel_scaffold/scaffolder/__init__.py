"""laravel-scaffold scaffolder -- generates CRUD resources for Laravel.

Given a resource name, a model name and a ``name:type`` column list, renders
a controller, a model, a migration, three Blade views and the shared layout,
and registers a resource route.

Quick usage::

    from laravel_scaffold.config import Config
    from laravel_scaffold.scaffolder import ScaffoldGenerator

    generator = ScaffoldGenerator(Config(project_root="/srv/blog"))
    result = await generator.generate("post", "Post", "title:string,views:integer")
"""

from laravel_scaffold.scaffolder.columns import ColumnSpec, parse_columns
from laravel_scaffold.scaffolder.errors import (
    ArtifactWriteError,
    InvalidArgumentError,
    MalformedColumnError,
    ScaffoldError,
    TemplateRenderError,
)
from laravel_scaffold.scaffolder.generator import (
    ArtifactKind,
    ArtifactStatus,
    GeneratedArtifact,
    ScaffoldGenerator,
    ScaffoldRequest,
    ScaffoldResult,
)
from laravel_scaffold.scaffolder.routes import RouteRegistry
from laravel_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactKind",
    "ArtifactStatus",
    "ArtifactWriteError",
    "ColumnSpec",
    "GeneratedArtifact",
    "InvalidArgumentError",
    "MalformedColumnError",
    "RouteRegistry",
    "ScaffoldError",
    "ScaffoldGenerator",
    "ScaffoldRequest",
    "ScaffoldResult",
    "TemplateRenderError",
    "TemplateRenderer",
    "parse_columns",
]
