"""Exceptions raised by the build stages."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class BuildError(Exception):
    """Base class for failures that abort the build."""


class FrontmatterError(BuildError):
    """The text around the frontmatter delimiters is malformed."""

    def __init__(self, message: str = "Unable to split YAML frontmatter", path: Optional[Union[str, Path]] = None) -> None:
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)
        self.path = path


class MissingFieldError(BuildError):
    """A decoded record lacks a required field."""

    def __init__(self, field: str, path: Union[str, Path], kind: str = "record") -> None:
        super().__init__(f"No {field} for {kind}: {path}")
        self.field = field
        self.path = path
        self.kind = kind


class StylesheetError(BuildError):
    """A stylesheet could not be compiled."""


class StageError(BuildError):
    """Wraps the first failure of a build stage."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage}: {cause}")
        self.stage = stage
        self.cause = cause
