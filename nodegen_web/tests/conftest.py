from __future__ import annotations

import logging
import stat
import textwrap
from pathlib import Path

import pytest

from nodegen_web.config.ini_config import AppSettings
from nodegen_web.repositories.resource_repository import ResourceRepository
from nodegen_web.repositories.workspace_repository import WorkspaceRepository
from nodegen_web.services.generator_service import GeneratorService
from nodegen_web.services.project_service import ProjectService
from nodegen_web.services.spec_classifier import JsonOrYamlSpecClassifier


# -----------------------------
# Generator stubs
# -----------------------------
# Stubs are called as: <stub> -o <output_dir> [-t <template_dir>] <spec_file>

SUCCESS_STUB = """\
    out="$2"
    mkdir -p "$out/src/routes"
    printf 'module.exports = {};\\n' > "$out/index.js"
    printf 'exports.list = () => [];\\n' > "$out/src/routes/users.js"
    echo "Done! wrote 2 files"
"""

FAILURE_STUB = """\
    echo "Error: bad spec"
    echo "  at line 1" >&2
    exit 0
"""

CRASH_STUB = """\
    kill -9 $$
"""


@pytest.fixture
def make_stub(tmp_path: Path):
    """Writes an executable /bin/sh script and returns its path."""
    def _make(body: str, name: str = "snc") -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        path = bin_dir / name
        path.write_text("#!/bin/sh\n" + textwrap.dedent(body), encoding="utf-8")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    d = tmp_path / "rhnodejs-template"
    d.mkdir()
    (d / "index.hbs").write_text("{{title}}", encoding="utf-8")
    return d


@pytest.fixture
def scratch_base(tmp_path: Path) -> Path:
    d = tmp_path / "scratch"
    d.mkdir()
    return d


@pytest.fixture
def make_project_service(template_dir: Path, scratch_base: Path):
    def _make(generator_path: Path, *, timeout_seconds: int = 30) -> ProjectService:
        return ProjectService(
            generator=GeneratorService(
                generator_path=generator_path,
                template_dir=template_dir,
                timeout_seconds=timeout_seconds,
                logger=logging.getLogger("test.generator"),
            ),
            classifier=JsonOrYamlSpecClassifier(),
            resources=ResourceRepository(),
            workspaces=WorkspaceRepository(base_dir=scratch_base),
        )

    return _make


@pytest.fixture
def make_settings(tmp_path: Path, template_dir: Path, scratch_base: Path):
    def _make(generator_path: Path, **overrides) -> AppSettings:
        values = dict(
            generator_path=generator_path,
            template_dir=template_dir,
            use_template=True,
            scratch_base=scratch_base,
            timeout_seconds=30,
            max_spec_bytes=1024 * 1024,
            log_level="DEBUG",
            flask_host="127.0.0.1",
            flask_port=5000,
            flask_debug=False,
        )
        values.update(overrides)
        return AppSettings(**values)

    return _make


@pytest.fixture
def success_stub(make_stub) -> Path:
    return make_stub(SUCCESS_STUB, name="snc-ok")


@pytest.fixture
def failure_stub(make_stub) -> Path:
    return make_stub(FAILURE_STUB, name="snc-fail")


@pytest.fixture
def crash_stub(make_stub) -> Path:
    return make_stub(CRASH_STUB, name="snc-crash")
