"""Resolution of user supplied project paths into destination directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import UnsupportedPathShapeError, WorkspaceRootNotConfiguredError
from .settings import Settings

__all__ = ["PathResolver", "clean_path"]


LOGGER = logging.getLogger(__name__)


def clean_path(path: str) -> str:
    """Collapse redundant separators and ``.``/``..`` segments in ``path``."""

    cleaned = os.path.normpath(path)
    if cleaned.startswith(os.sep * 2):
        cleaned = os.sep + cleaned.lstrip(os.sep)
    return cleaned


class PathResolver:
    """Turn a project path into the absolute directory to generate into.

    The accepted shapes mirror the usual source layout shorthand:

    * ``""`` is the working directory.
    * ``/abs/path`` is used as given, once cleaned.
    * ``account/project`` lives under ``<workspace>/<default domain>``.
    * ``domain/account/project`` lives under ``<workspace>``.
    * ``project`` is a folder inside the working directory.

    Anything deeper than three relative segments is rejected.
    """

    def __init__(self, settings: Settings, cwd: str | Path | None = None) -> None:
        self._settings = settings
        self._cwd = os.path.abspath(cwd) if cwd is not None else os.getcwd()

    @property
    def cwd(self) -> str:
        return self._cwd

    def resolve(self, path: str) -> str:
        if not path:
            return self._cwd

        if os.path.isabs(path) or path.startswith(os.sep):
            return clean_path(path)

        separators = path.count(os.sep)
        if separators == 1:
            resolved = os.path.join(self._workspace_root(path), self._settings.default_domain, path)
        elif separators == 2:
            resolved = os.path.join(self._workspace_root(path), path)
        elif separators > 2:
            raise UnsupportedPathShapeError(path)
        else:
            resolved = os.path.join(self._cwd, path)

        resolved = clean_path(resolved)
        LOGGER.debug("resolved %r to %s", path, resolved)
        return resolved

    def relative_to_workspace(self, path: str | Path) -> str:
        """Return ``path`` relative to the workspace root with ``/`` separators.

        Paths outside the workspace, or any path when no workspace root is
        configured, are returned absolute and a warning is logged since they
        do not make valid Go import paths.
        """

        absolute = Path(clean_path(os.path.abspath(path)))
        root = self._settings.workspace_root
        if root is not None:
            try:
                return absolute.relative_to(root).as_posix()
            except ValueError:
                pass
        LOGGER.warning(
            "%s is outside the workspace root; generated import paths will be absolute", absolute
        )
        return absolute.as_posix()

    def _workspace_root(self, path: str) -> str:
        root = self._settings.workspace_root
        if root is None:
            raise WorkspaceRootNotConfiguredError(path)
        return str(root)
