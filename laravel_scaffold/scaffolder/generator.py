"""Main scaffolding orchestrator.

Takes a resource name, a model name and a column list and generates the
Laravel controller, model, migration, views, shared layout and route
registration for that resource.

The pipeline is linear: parse -> classify -> render every artifact ->
persist in order.  Rendering completes before the first write, and the
first failing write aborts the remaining ones.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import TemplateError
from pydantic import BaseModel, Field

from laravel_scaffold.config import Config
from laravel_scaffold.utils import write_file

from .columns import ColumnSpec, fillable_attributes, migration_columns, parse_columns
from .errors import ArtifactWriteError, InvalidArgumentError, TemplateRenderError
from .routes import RouteRegistry
from .templates import TemplateRenderer, pascal_case, ucfirst


# ---------------------------------------------------------------------------
# Artifact model
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    CONTROLLER = "controller"
    LAYOUT = "layout"
    ROUTE = "route"
    INDEX_VIEW = "index_view"
    CREATE_VIEW = "create_view"
    EDIT_VIEW = "edit_view"
    MIGRATION = "migration"
    MODEL = "model"


class ArtifactStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"


# Rendering and persistence order.
ARTIFACT_TEMPLATES: dict[ArtifactKind, str] = {
    ArtifactKind.CONTROLLER: "controller.php.j2",
    ArtifactKind.LAYOUT: "layouts/app.blade.php.j2",
    ArtifactKind.ROUTE: "route.php.j2",
    ArtifactKind.INDEX_VIEW: "views/index.blade.php.j2",
    ArtifactKind.CREATE_VIEW: "views/create.blade.php.j2",
    ArtifactKind.EDIT_VIEW: "views/edit.blade.php.j2",
    ArtifactKind.MIGRATION: "migration.php.j2",
    ArtifactKind.MODEL: "model.php.j2",
}

MIGRATION_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"


class GeneratedArtifact(BaseModel):
    """One rendered file payload and the path it is written to."""

    kind: ArtifactKind
    path: Path
    content: str


class ScaffoldRequest(BaseModel):
    """Validated generator input."""

    name: str = Field(..., min_length=1, description="Resource/route base name, e.g. 'post'")
    model: str = Field(..., min_length=1, description="Model base name, e.g. 'Post'")
    columns: list[ColumnSpec] = Field(..., min_length=1)

    @classmethod
    def from_args(cls, name: str, model: str, columns: str) -> "ScaffoldRequest":
        """Build a request from raw command-line strings.

        Raises:
            InvalidArgumentError: If *name* or *model* is blank.
            MalformedColumnError: If a column token is not ``name:type``.
        """
        name = (name or "").strip()
        model = (model or "").strip()
        if not name:
            raise InvalidArgumentError("name")
        if not model:
            raise InvalidArgumentError("model")
        return cls(name=name, model=model, columns=parse_columns(columns))


class ScaffoldResult(BaseModel):
    """Outcome of one ``generate`` call."""

    artifacts: list[GeneratedArtifact] = Field(default_factory=list)
    statuses: dict[ArtifactKind, ArtifactStatus] = Field(default_factory=dict)

    def paths_with_status(self, status: ArtifactStatus) -> list[Path]:
        return [a.path for a in self.artifacts if self.statuses.get(a.kind) == status]

    @property
    def written(self) -> list[Path]:
        return self.paths_with_status(ArtifactStatus.WRITTEN)

    @property
    def skipped(self) -> list[Path]:
        return self.paths_with_status(ArtifactStatus.SKIPPED)

    @property
    def unchanged(self) -> list[Path]:
        return self.paths_with_status(ArtifactStatus.UNCHANGED)

    def get(self, kind: ArtifactKind) -> GeneratedArtifact:
        """Return the artifact of the given kind."""
        for artifact in self.artifacts:
            if artifact.kind == kind:
                return artifact
        raise KeyError(kind)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """Main scaffolding orchestrator.

    Given a ``Config``, renders and writes for one resource:
    - Controller with index/create/store/edit/update/destroy actions
    - Shared ``layouts/app`` Blade layout (only when absent, unless forced)
    - Route registration in the routes file (idempotent)
    - index/create/edit Blade views
    - Timestamped create-table migration
    - Eloquent model with its ``$fillable`` list
    """

    def __init__(
        self,
        config: Config | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config or Config()
        self.clock = clock
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.routes = RouteRegistry(self.config.routes_path)

    # -- Public API --------------------------------------------------------

    async def generate(self, name: str, model: str, columns: str) -> ScaffoldResult:
        """Generate the complete scaffold for one resource.

        Args:
            name: Resource name, e.g. ``"post"``.
            model: Model name, e.g. ``"Post"``.
            columns: Column list, e.g. ``"title:string,views:integer"``.

        Returns:
            A ``ScaffoldResult`` describing every artifact and what happened
            to it.

        Raises:
            ScaffoldError: On invalid input, a template error or a failed
                write.  Writes already performed are not rolled back.
        """
        request = ScaffoldRequest.from_args(name, model, columns)
        return await self.generate_request(request)

    async def generate_request(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Render and persist every artifact for an already-validated request."""
        context = self.build_context(request)
        artifacts = self.render_artifacts(context)

        result = ScaffoldResult(artifacts=artifacts)
        for artifact in artifacts:
            result.statuses[artifact.kind] = await self._persist(artifact)
        return result

    # -- Context building --------------------------------------------------

    def build_context(self, request: ScaffoldRequest) -> dict[str, Any]:
        """Build the Jinja2 template context for a request."""
        fillable = fillable_attributes(
            request.columns, self.config.fillable_excluded_types
        )
        model_name = ucfirst(request.model)
        return {
            "name": request.name,
            "view_dir": request.name.lower(),
            "model_name": model_name,
            "controller_name": f"{ucfirst(request.name)}Controller",
            "migration_class": f"Create{pascal_case(request.name)}Table",
            "table_name": f"{model_name}s",
            "columns": request.columns,
            "migration_columns": migration_columns(request.columns),
            "fillable": fillable,
            "fillable_column_list": ", ".join(fillable),
            "timestamp": self.clock().strftime(MIGRATION_TIMESTAMP_FORMAT),
        }

    # -- Rendering ---------------------------------------------------------

    def render_artifacts(self, ctx: dict[str, Any]) -> list[GeneratedArtifact]:
        """Render every artifact in persistence order without touching disk."""
        artifacts: list[GeneratedArtifact] = []
        for kind, template_name in ARTIFACT_TEMPLATES.items():
            try:
                content = self.renderer.render(template_name, ctx)
            except TemplateError as exc:
                raise TemplateRenderError(kind.value, exc) from exc
            artifacts.append(
                GeneratedArtifact(kind=kind, path=self.artifact_path(kind, ctx), content=content)
            )
        return artifacts

    def artifact_path(self, kind: ArtifactKind, ctx: dict[str, Any]) -> Path:
        """Return the target path of an artifact kind for the given context."""
        views_dir = self.config.views_path / ctx["view_dir"]
        paths = {
            ArtifactKind.CONTROLLER: self.config.controllers_path / f"{ctx['controller_name']}.php",
            ArtifactKind.LAYOUT: self.config.layout_path,
            ArtifactKind.ROUTE: self.config.routes_path,
            ArtifactKind.INDEX_VIEW: views_dir / "index.blade.php",
            ArtifactKind.CREATE_VIEW: views_dir / "create.blade.php",
            ArtifactKind.EDIT_VIEW: views_dir / "edit.blade.php",
            ArtifactKind.MIGRATION: self.config.migrations_path
            / f"{ctx['timestamp']}_create_{ctx['view_dir']}_table.php",
            ArtifactKind.MODEL: self.config.models_path / f"{ctx['model_name']}.php",
        }
        return paths[kind]

    # -- Persistence -------------------------------------------------------

    async def _persist(self, artifact: GeneratedArtifact) -> ArtifactStatus:
        if artifact.kind is ArtifactKind.ROUTE:
            added = await self.routes.register(artifact.content)
            return ArtifactStatus.WRITTEN if added else ArtifactStatus.UNCHANGED

        if (
            artifact.kind is ArtifactKind.LAYOUT
            and not self.config.force_layout
            and artifact.path.exists()
        ):
            return ArtifactStatus.SKIPPED

        try:
            await asyncio.to_thread(write_file, artifact.path, artifact.content)
        except OSError as exc:
            raise ArtifactWriteError(artifact.path, exc) from exc
        return ArtifactStatus.WRITTEN
