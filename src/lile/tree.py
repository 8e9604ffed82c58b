"""In-memory model of the folders and files making up a generated service."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .errors import ProjectNameError, UnknownTemplateError
from .template import TEMPLATE_IDS

__all__ = ["FileSpec", "FolderNode", "build_tree"]


@dataclass(frozen=True, slots=True)
class FileSpec:
    """A file to render: its name inside the folder and the template behind it."""

    relative_name: str
    template_id: str


@dataclass(slots=True)
class FolderNode:
    """A directory of the generated tree.

    Child folders are only created through :meth:`add_folder`, so every node
    has exactly one parent and its path is always ``parent.path / name``.
    """

    name: str
    path: Path
    folders: list["FolderNode"] = field(default_factory=list)
    files: list[FileSpec] = field(default_factory=list)

    def add_folder(self, name: str) -> "FolderNode":
        _check_segment(name)
        child = FolderNode(name=name, path=self.path / name)
        self.folders.append(child)
        return child

    def add_file(self, relative_name: str, template_id: str) -> FileSpec:
        if template_id not in TEMPLATE_IDS:
            raise UnknownTemplateError(template_id)
        spec = FileSpec(relative_name=relative_name, template_id=template_id)
        self.files.append(spec)
        return spec

    def walk(self) -> Iterator["FolderNode"]:
        """Yield this folder and its descendants depth first, in insertion order."""

        yield self
        for folder in self.folders:
            yield from folder.walk()

    def file_paths(self) -> list[Path]:
        return [folder.path / spec.relative_name for folder in self.walk() for spec in folder.files]


def _check_segment(name: str) -> None:
    if not name or name in {".", ".."} or "/" in name or "\\" in name:
        raise ProjectNameError(f"{name!r} is not a valid folder name")


def build_tree(name: str, destination: str | Path) -> FolderNode:
    """Return the folder tree of a service called ``name`` rooted at ``destination``."""

    _check_segment(name)
    root = FolderNode(name=name, path=Path(destination))

    server = root.add_folder("server")
    server.add_file("server.go", "server.tmpl")
    server.add_file("server_test.go", "server_test.tmpl")

    subscribers = root.add_folder("subscribers")
    subscribers.add_file("subscribers.go", "subscribers.tmpl")

    command = root.add_folder(name)
    command.add_file("main.go", "main.tmpl")

    commands = command.add_folder("cmd")
    commands.add_file("root.go", "root.tmpl")
    commands.add_file("up.go", "up.tmpl")

    root.add_file(f"{name}.proto", "proto.tmpl")
    root.add_file("client.go", "client.tmpl")
    root.add_file("Makefile", "Makefile.tmpl")
    root.add_file("Dockerfile", "Dockerfile.tmpl")
    root.add_file(".gitignore", "gitignore.tmpl")

    return root
