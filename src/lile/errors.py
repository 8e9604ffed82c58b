"""Exception types raised while generating a service project."""

from __future__ import annotations

__all__ = [
    "LileError",
    "UnsupportedPathShapeError",
    "WorkspaceRootNotConfiguredError",
    "ProjectNameError",
    "ConfigurationError",
    "UnknownTemplateError",
    "FilesystemError",
]


class LileError(RuntimeError):
    """Base class for every error reported by the generator."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnsupportedPathShapeError(LileError):
    """Raised when a relative project path has more than three segments."""

    def __init__(self, path: str) -> None:
        super().__init__(f"unknown directory shape: {path!r}")
        self.path = path


class WorkspaceRootNotConfiguredError(LileError):
    """Raised when a shorthand path needs a workspace root that is not set."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"cannot resolve {path!r}: no workspace root configured "
            "(set LILE_WORKSPACE_ROOT or GOPATH, or pass an absolute path)"
        )
        self.path = path


class ProjectNameError(LileError):
    """Raised when a project name cannot be turned into identifiers."""


class ConfigurationError(LileError):
    """Raised when environment configuration holds invalid values."""


class UnknownTemplateError(LileError):
    """Raised when a template identifier is not part of the registry."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"unknown template '{template_id}'")
        self.template_id = template_id


class FilesystemError(LileError):
    """Raised when a directory or file cannot be created or read."""
