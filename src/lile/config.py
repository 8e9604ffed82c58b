"""Project data shared by the tree builder, the writer and the templates."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .errors import ProjectNameError
from .naming import NameVariants
from .paths import PathResolver
from .tree import FolderNode, build_tree

__all__ = ["Project"]


@dataclass(frozen=True, slots=True)
class Project:
    """Everything known about the service being generated.

    Attributes
    ----------
    name:
        Last segment of the resolved project directory.
    relative_name:
        The path exactly as the user typed it.
    project_dir:
        Absolute destination directory.
    rel_dir:
        :attr:`project_dir` relative to the workspace root with ``/``
        separators, e.g. ``github.com/acme/users``. Templates use it as the Go
        import path of the service. Absolute when the project lives outside
        the workspace.
    folder:
        Root of the folder tree to render.
    names:
        The identifier casings derived from :attr:`name`.
    """

    name: str
    relative_name: str
    project_dir: Path
    rel_dir: str
    folder: FolderNode
    names: NameVariants

    @classmethod
    def from_path(cls, relative_name: str, resolver: PathResolver) -> "Project":
        """Resolve ``relative_name`` and describe the project that lives there."""

        project_dir = resolver.resolve(relative_name)
        name = os.path.basename(project_dir)
        if not name:
            raise ProjectNameError(f"cannot derive a project name from {project_dir!r}")

        return cls(
            name=name,
            relative_name=relative_name,
            project_dir=Path(project_dir),
            rel_dir=resolver.relative_to_workspace(project_dir),
            folder=build_tree(name, project_dir),
            names=NameVariants.derive(name),
        )

    @property
    def camel_case_name(self) -> str:
        return self.names.camel

    @property
    def snake_case_name(self) -> str:
        return self.names.snake

    @property
    def dns_name(self) -> str:
        return self.names.dns

    def context(self) -> Mapping[str, Any]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "relative_name": self.relative_name,
            "project_dir": self.project_dir.as_posix(),
            "rel_dir": self.rel_dir,
            "camel_case_name": self.camel_case_name,
            "snake_case_name": self.snake_case_name,
            "dns_name": self.dns_name,
        }
