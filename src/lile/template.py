"""Built-in service templates and the placeholder renderer that fills them."""

from __future__ import annotations

import re
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

from .errors import FilesystemError, LileError, UnknownTemplateError

__all__ = [
    "TEMPLATE_IDS",
    "TemplateRegistry",
    "TemplateRenderer",
    "TemplateRenderingError",
]


TEMPLATE_IDS: frozenset[str] = frozenset(
    {
        "server.tmpl",
        "server_test.tmpl",
        "subscribers.tmpl",
        "main.tmpl",
        "root.tmpl",
        "up.tmpl",
        "proto.tmpl",
        "client.tmpl",
        "Makefile.tmpl",
        "Dockerfile.tmpl",
        "gitignore.tmpl",
    }
)

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[^{}]+?)\s*}}")


class TemplateRenderingError(LileError):
    """Raised when a template refers to a value the project does not provide."""


class TemplateRenderer:
    """Render templates with ``{{ key }}`` placeholders.

    Every placeholder must name a key of the context; an unknown key raises
    :class:`TemplateRenderingError` so no half rendered file reaches the disk.
    """

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            try:
                return str(context[key])
            except KeyError:
                raise TemplateRenderingError(f"missing value for '{key}'") from None

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


class TemplateRegistry:
    """Load the text of the built-in templates by identifier.

    By default templates come from the ``lile/templates`` package data. A
    directory holding files named after the same identifiers can be supplied
    instead to customise their contents; the set of identifiers is fixed.
    """

    def __init__(self, source: str | Path | None = None) -> None:
        self._source = Path(source) if source is not None else None
        self._cache: dict[str, str] = {}

    def load(self, template_id: str) -> str:
        if template_id not in TEMPLATE_IDS:
            raise UnknownTemplateError(template_id)

        if template_id not in self._cache:
            self._cache[template_id] = self._read(template_id)
        return self._cache[template_id]

    def _read(self, template_id: str) -> str:
        try:
            if self._source is None:
                resource = resources.files("lile").joinpath("templates").joinpath(template_id)
                return resource.read_text(encoding="utf-8")
            return (self._source / template_id).read_text(encoding="utf-8")
        except OSError as exc:
            location = self._source or "built-in templates"
            raise FilesystemError(f"cannot read template '{template_id}' from {location}: {exc}") from exc
