"""Route registry for the shared ``routes/web.php`` file.

Registrations are idempotent: a route line is appended only when no
identical line (ignoring surrounding whitespace) is already present.
Bytes that are not valid UTF-8 are round-tripped unchanged.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .errors import ArtifactWriteError

ROUTES_FILE_HEADER = "<?php\n\nuse Illuminate\\Support\\Facades\\Route;\n\n"

# Keeps undecodable bytes as lone surrogates so they are written back as-is.
_ENCODING = {"encoding": "utf-8", "errors": "surrogateescape"}


def _has_line(text: str, line: str) -> bool:
    return line.strip() in (entry.strip() for entry in text.splitlines())


class RouteRegistry:
    """Reads and extends a Laravel routes file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def contains(self, route_line: str) -> bool:
        """Return ``True`` if *route_line* is already registered."""
        if not self.path.exists():
            return False
        return _has_line(self.path.read_text(**_ENCODING), route_line)

    async def register(self, route_line: str) -> bool:
        """Append *route_line* unless it is already registered.

        A missing routes file is created with the standard header.

        Returns:
            ``True`` if the line was appended, ``False`` if it was already
            present.

        Raises:
            ArtifactWriteError: If the routes file cannot be read or written.
        """
        try:
            return await asyncio.to_thread(self._register_sync, route_line.strip())
        except OSError as exc:
            raise ArtifactWriteError(self.path, exc, step="route") from exc

    def _register_sync(self, line: str) -> bool:
        if self.contains(line):
            return False

        if self.path.exists():
            existing = self.path.read_text(**_ENCODING)
        else:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            existing = ROUTES_FILE_HEADER

        if existing and not existing.endswith("\n"):
            existing += "\n"
        self.path.write_text(existing + line + "\n", **_ENCODING)
        return True
