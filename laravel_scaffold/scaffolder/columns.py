"""Column specification parsing and classification.

A column list is a comma-separated string of ``name:type`` tokens, e.g.
``"title:string,views:integer"``.  Each column always becomes a migration
column; only columns whose type is not numeric/boolean become fillable
model attributes.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from laravel_scaffold.config import DEFAULT_FILLABLE_EXCLUDED_TYPES

from .errors import InvalidArgumentError, MalformedColumnError


class ColumnSpec(BaseModel):
    """A single parsed ``name:type`` column."""

    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Schema builder method, e.g. 'string'")

    @property
    def definition(self) -> str:
        """Return the ``name:type`` form used in migration column lists."""
        return f"{self.name}:{self.type}"


def parse_columns(raw: str) -> list[ColumnSpec]:
    """Parse a comma-separated column list into ``ColumnSpec`` objects.

    Whitespace around tokens and around each side of the separator is
    ignored.  Order and duplicates are preserved.

    Raises:
        InvalidArgumentError: If *raw* is empty.
        MalformedColumnError: If a token does not contain exactly one ``:``
            with a non-empty name and type.
    """
    if not raw or not raw.strip():
        raise InvalidArgumentError("columns")

    columns: list[ColumnSpec] = []
    for index, token in enumerate(raw.split(",")):
        parts = token.split(":")
        if len(parts) != 2:
            raise MalformedColumnError(token, index)
        name, type_ = (p.strip() for p in parts)
        if not name or not type_:
            raise MalformedColumnError(token, index)
        columns.append(ColumnSpec(name=name, type=type_))
    return columns


def fillable_attributes(
    columns: Iterable[ColumnSpec],
    excluded_types: Iterable[str] = DEFAULT_FILLABLE_EXCLUDED_TYPES,
) -> list[str]:
    """Return the names of columns that may be mass-assigned, in input order."""
    excluded = set(excluded_types)
    return [c.name for c in columns if c.type not in excluded]


def migration_columns(columns: Iterable[ColumnSpec]) -> list[str]:
    """Return one ``name:type`` entry per column, in input order."""
    return [c.definition for c in columns]
