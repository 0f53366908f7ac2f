"""laravel-scaffold configuration.

Typed configuration for the generator. Settings are Pydantic v2 models so
they validate at construction time and round-trip to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_FILLABLE_EXCLUDED_TYPES: list[str] = [
    "integer",
    "bigInteger",
    "float",
    "double",
    "boolean",
]

_TRUTHY = {"1", "true", "yes", "on"}


class PathConfig(BaseModel):
    """Directory layout of the target Laravel project.

    Every directory is relative to ``Config.project_root``.
    """

    controllers: str = Field(default="app/Http/Controllers")
    models: str = Field(default="app/Models")
    migrations: str = Field(default="database/migrations")
    views: str = Field(default="resources/views")
    routes: str = Field(default="routes")
    routes_file: str = Field(default="web.php")


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point (from a JSON file or the
    environment) and passed to ``ScaffoldGenerator``.
    """

    project_root: Path = Field(default=Path("."))
    paths: PathConfig = Field(default_factory=PathConfig)
    fillable_excluded_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILLABLE_EXCLUDED_TYPES),
        description="Column types never added to a model's $fillable list",
    )
    template_dir: Path | None = Field(
        default=None, description="Alternative template directory (defaults to bundled templates)"
    )
    force_layout: bool = Field(
        default=False, description="Overwrite the shared layout even when it already exists"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def controllers_path(self) -> Path:
        return self.project_root / self.paths.controllers

    @property
    def models_path(self) -> Path:
        return self.project_root / self.paths.models

    @property
    def migrations_path(self) -> Path:
        return self.project_root / self.paths.migrations

    @property
    def views_path(self) -> Path:
        return self.project_root / self.paths.views

    @property
    def layout_path(self) -> Path:
        """Path to the shared ``layouts/app.blade.php`` template."""
        return self.views_path / "layouts" / "app.blade.php"

    @property
    def routes_path(self) -> Path:
        """Path to the routes file that receives resource registrations."""
        return self.project_root / self.paths.routes / self.paths.routes_file

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            LARAVEL_SCAFFOLD_ROOT, LARAVEL_SCAFFOLD_TEMPLATES,
            LARAVEL_SCAFFOLD_EXCLUDED_TYPES, LARAVEL_SCAFFOLD_FORCE_LAYOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LARAVEL_SCAFFOLD_ROOT"):
            kwargs["project_root"] = Path(os.environ["LARAVEL_SCAFFOLD_ROOT"])
        if os.environ.get("LARAVEL_SCAFFOLD_TEMPLATES"):
            kwargs["template_dir"] = Path(os.environ["LARAVEL_SCAFFOLD_TEMPLATES"])
        if os.environ.get("LARAVEL_SCAFFOLD_EXCLUDED_TYPES"):
            raw = os.environ["LARAVEL_SCAFFOLD_EXCLUDED_TYPES"]
            kwargs["fillable_excluded_types"] = [
                t.strip() for t in raw.split(",") if t.strip()
            ]
        if os.environ.get("LARAVEL_SCAFFOLD_FORCE_LAYOUT"):
            flag = os.environ["LARAVEL_SCAFFOLD_FORCE_LAYOUT"].strip().lower()
            kwargs["force_layout"] = flag in _TRUTHY

        return cls(**kwargs)
