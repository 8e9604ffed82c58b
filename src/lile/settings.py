"""Process wide configuration read once from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

__all__ = ["Settings", "DEFAULT_DOMAIN", "WORKSPACE_ROOT_ENV", "DEFAULT_DOMAIN_ENV"]

DEFAULT_DOMAIN = "github.com"
WORKSPACE_ROOT_ENV = "LILE_WORKSPACE_ROOT"
DEFAULT_DOMAIN_ENV = "LILE_DEFAULT_DOMAIN"


class Settings(BaseModel):
    """Configuration consumed by the path resolver.

    Attributes
    ----------
    workspace_root:
        Base directory under which ``domain/account/project`` shorthand paths
        live. ``None`` when neither ``LILE_WORKSPACE_ROOT`` nor ``GOPATH`` is
        set, in which case only bare and absolute paths can be resolved.
    default_domain:
        Hosting domain assumed for two segment ``account/project`` paths.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    workspace_root: Path | None = Field(None, description="Base directory for shorthand project paths.")
    default_domain: str = Field(DEFAULT_DOMAIN, description="Domain prefixed to account/project paths.")

    @field_validator("workspace_root")
    @classmethod
    def _absolute_root(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return Path(os.path.abspath(value.expanduser()))

    @field_validator("default_domain")
    @classmethod
    def _single_segment_domain(cls, value: str) -> str:
        domain = value.strip()
        if not domain:
            raise ValueError("default domain must not be empty")
        if "/" in domain or os.sep in domain:
            raise ValueError("default domain must be a single path segment")
        return domain

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        ``LILE_WORKSPACE_ROOT`` wins over ``GOPATH``; when only ``GOPATH`` is
        set its first entry's ``src`` directory is used.
        """

        env = os.environ if environ is None else environ

        root: Path | None = None
        explicit = env.get(WORKSPACE_ROOT_ENV, "").strip()
        gopath = env.get("GOPATH", "").strip()
        if explicit:
            root = Path(explicit)
        elif gopath:
            root = Path(gopath.split(os.pathsep)[0]) / "src"

        domain = env.get(DEFAULT_DOMAIN_ENV, "").strip() or DEFAULT_DOMAIN
        try:
            return cls(workspace_root=root, default_domain=domain)
        except ValidationError as exc:
            problems = "; ".join(error["msg"] for error in exc.errors())
            raise ConfigurationError(f"invalid lile configuration: {problems}") from exc
