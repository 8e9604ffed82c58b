"""Generate boilerplate for new gRPC services.

A single project path is resolved to a destination directory, turned into a
fixed tree of folders and templated files, and rendered to disk with the
project's name in its camel, snake and DNS friendly forms. Everything is
usable programmatically as well as through the ``lile`` command.
"""

from __future__ import annotations

from .config import Project
from .errors import (
    ConfigurationError,
    FilesystemError,
    LileError,
    ProjectNameError,
    UnknownTemplateError,
    UnsupportedPathShapeError,
    WorkspaceRootNotConfiguredError,
)
from .naming import NameVariants, camel_case, dns_name, snake_case
from .paths import PathResolver
from .scaffold import ProjectWriter, write_project
from .settings import Settings
from .template import TEMPLATE_IDS, TemplateRegistry, TemplateRenderer, TemplateRenderingError
from .tree import FileSpec, FolderNode, build_tree

__all__ = [
    "TEMPLATE_IDS",
    "ConfigurationError",
    "FileSpec",
    "FilesystemError",
    "FolderNode",
    "LileError",
    "NameVariants",
    "PathResolver",
    "Project",
    "ProjectNameError",
    "ProjectWriter",
    "Settings",
    "TemplateRegistry",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnknownTemplateError",
    "UnsupportedPathShapeError",
    "WorkspaceRootNotConfiguredError",
    "build_tree",
    "camel_case",
    "dns_name",
    "snake_case",
    "write_project",
]

__version__ = "0.1.0"
