from __future__ import annotations

from pathlib import Path

import pytest

from lile.config import Project
from lile.errors import FilesystemError
from lile.paths import PathResolver
from lile.scaffold import ProjectWriter, write_project
from lile.template import TEMPLATE_IDS, TemplateRegistry, TemplateRenderingError


@pytest.fixture()
def writer() -> ProjectWriter:
    return ProjectWriter()


@pytest.fixture()
def project(resolver: PathResolver) -> Project:
    return Project.from_path("acme/user-service", resolver)


def _copy_builtin_templates(target: Path) -> Path:
    target.mkdir()
    registry = TemplateRegistry()
    for template_id in TEMPLATE_IDS:
        (target / template_id).write_text(registry.load(template_id), encoding="utf-8")
    return target


def test_writer_creates_expected_structure(writer: ProjectWriter, project: Project):
    written = writer.write(project)

    root = project.project_dir
    expected_files = [
        root / "server" / "server.go",
        root / "server" / "server_test.go",
        root / "subscribers" / "subscribers.go",
        root / "user-service" / "main.go",
        root / "user-service" / "cmd" / "root.go",
        root / "user-service" / "cmd" / "up.go",
        root / "user-service.proto",
        root / "client.go",
        root / "Makefile",
        root / "Dockerfile",
        root / ".gitignore",
    ]
    for path in expected_files:
        assert path.is_file(), f"expected {path} to exist"
    assert sorted(written) == sorted(expected_files)
    assert written == project.folder.file_paths()


def test_writer_renders_project_names(writer: ProjectWriter, project: Project):
    writer.write(project)
    root = project.project_dir

    proto = (root / "user-service.proto").read_text(encoding="utf-8")
    assert 'option go_package = "github.com/acme/user-service;user_service";' in proto
    assert "service UserService {" in proto

    server = (root / "server" / "server.go").read_text(encoding="utf-8")
    assert "type UserServiceServer struct" in server
    assert '"github.com/acme/user-service"' in server

    main = (root / "user-service" / "main.go").read_text(encoding="utf-8")
    assert '"github.com/acme/user-service/user-service/cmd"' in main

    makefile = (root / "Makefile").read_text(encoding="utf-8")
    assert "protoc -I . user-service.proto" in makefile


def test_writer_leaves_no_placeholders(writer: ProjectWriter, project: Project):
    for path in writer.write(project):
        assert "{{" not in path.read_text(encoding="utf-8"), path


def test_writer_overwrites_on_second_run(writer: ProjectWriter, project: Project):
    writer.write(project)
    makefile = project.project_dir / "Makefile"
    original = makefile.read_text(encoding="utf-8")
    makefile.write_text("custom", encoding="utf-8")

    writer.write(project)
    assert makefile.read_text(encoding="utf-8") == original


def test_writer_accepts_existing_destination(writer: ProjectWriter, project: Project):
    project.project_dir.mkdir(parents=True)
    writer.write(project)
    assert (project.project_dir / "client.go").is_file()


def test_writer_stays_inside_project_dir(tmp_path: Path, writer: ProjectWriter, project: Project):
    before = {path for path in tmp_path.rglob("*") if path.is_file()}
    writer.write(project)
    created = {path for path in tmp_path.rglob("*") if path.is_file()} - before
    assert created
    assert all(path.is_relative_to(project.project_dir) for path in created)


def test_writer_reports_unwritable_destination(tmp_path: Path, resolver: PathResolver, writer: ProjectWriter):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    project = Project.from_path(str(blocker / "users"), resolver)

    with pytest.raises(FilesystemError):
        writer.write(project)


def test_render_failure_stops_and_keeps_earlier_files(tmp_path: Path, project: Project):
    templates = _copy_builtin_templates(tmp_path / "templates")
    (templates / "server.tmpl").write_text("package {{ unknown_value }}\n", encoding="utf-8")
    writer = ProjectWriter(registry=TemplateRegistry(templates))

    with pytest.raises(TemplateRenderingError):
        writer.write(project)

    root = project.project_dir
    assert (root / "Makefile").is_file()
    assert not (root / "server" / "server.go").exists()
    assert not (root / "subscribers" / "subscribers.go").exists()


def test_custom_template_directory(tmp_path: Path, project: Project):
    templates = _copy_builtin_templates(tmp_path / "templates")
    (templates / "Makefile.tmpl").write_text("all:\n\techo {{ dns_name }}\n", encoding="utf-8")

    ProjectWriter(registry=TemplateRegistry(templates)).write(project)
    assert (project.project_dir / "Makefile").read_text(encoding="utf-8") == "all:\n\techo user-service\n"


def test_write_project_uses_builtin_templates(project: Project):
    written = write_project(project.folder, project)
    assert len(written) == len(TEMPLATE_IDS)
    assert (project.project_dir / ".gitignore").is_file()
