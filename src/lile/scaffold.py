"""Materialise a project's folder tree on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import Project
from .errors import FilesystemError
from .template import TemplateRegistry, TemplateRenderer
from .tree import FolderNode

__all__ = ["ProjectWriter", "write_project"]


LOGGER = logging.getLogger(__name__)


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"cannot create directory {path}: {exc}") from exc


@dataclass(slots=True)
class ProjectWriter:
    """Render every file of a project tree into its destination directory."""

    renderer: TemplateRenderer
    registry: TemplateRegistry

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        registry: TemplateRegistry | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.registry = registry or TemplateRegistry()

    def write(self, project: Project) -> list[Path]:
        """Write ``project`` and return the files written, in tree order.

        Existing files are overwritten. The first failure stops the walk and
        is raised as is; files written before it are left in place.
        """

        LOGGER.info("writing %s to %s", project.name, project.project_dir)
        _make_directory(project.project_dir)
        return self.write_tree(project.folder, project)

    def write_tree(self, tree: FolderNode, project: Project) -> list[Path]:
        context = project.context()
        written: list[Path] = []
        for folder in tree.walk():
            _make_directory(folder.path)
            for spec in folder.files:
                target = folder.path / spec.relative_name
                template = self.registry.load(spec.template_id)
                rendered = self.renderer.render_string(template, context)
                try:
                    target.write_text(rendered, encoding="utf-8")
                except OSError as exc:
                    raise FilesystemError(f"cannot write {target}: {exc}") from exc
                LOGGER.debug("wrote %s from %s", target, spec.template_id)
                written.append(target)
        return written


def write_project(tree: FolderNode, project: Project) -> list[Path]:
    """Write ``tree`` with the built-in templates and ``project`` data."""

    return ProjectWriter().write_tree(tree, project)
