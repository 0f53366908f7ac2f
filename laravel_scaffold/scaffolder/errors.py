"""Exceptions raised by the scaffold pipeline."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when a scaffold step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class InvalidArgumentError(ScaffoldError):
    """A required generator argument is empty."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__("parse", f"argument '{argument}' must not be empty")


class MalformedColumnError(ScaffoldError):
    """A column token is not of the form ``name:type``."""

    def __init__(self, token: str, index: int) -> None:
        self.token = token
        self.index = index
        super().__init__(
            "parse",
            f"malformed column specification {token!r} at index {index} "
            "(expected format name:type)",
        )


class TemplateRenderError(ScaffoldError):
    """A template failed to render."""

    def __init__(self, kind: str, cause: Exception) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__("render", f"could not render {kind}: {cause}")


class ArtifactWriteError(ScaffoldError):
    """Writing a generated artifact to disk failed."""

    def __init__(self, path: Path, cause: OSError, step: str = "write") -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(step, f"could not write {path}: {reason}")
