from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lile.paths import PathResolver  # noqa: E402
from lile.settings import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's GOPATH and lile settings out of the tests."""

    for name in ("GOPATH", "LILE_WORKSPACE_ROOT", "LILE_DEFAULT_DOMAIN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "go" / "src"
    root.mkdir(parents=True)
    return root


@pytest.fixture()
def resolver(tmp_path: Path, workspace: Path) -> PathResolver:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    return PathResolver(Settings(workspace_root=workspace), cwd=cwd)
