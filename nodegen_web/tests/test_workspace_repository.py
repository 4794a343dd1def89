from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from nodegen_web.repositories.workspace_repository import WorkspaceRepository


def test_scratch_creates_unique_directories_and_removes_them(tmp_path: Path):
    repo = WorkspaceRepository(base_dir=tmp_path / "scratch")

    with repo.scratch() as a, repo.scratch() as b:
        assert a != b
        assert a.is_dir() and b.is_dir()
        assert a.name.startswith("codegen")
        (a / "nested" / "dir").mkdir(parents=True)
        (a / "nested" / "dir" / "f.txt").write_text("x", encoding="utf-8")

    assert not a.exists()
    assert not b.exists()


def test_scratch_removes_directory_when_body_raises(tmp_path: Path):
    repo = WorkspaceRepository(base_dir=tmp_path)

    with pytest.raises(ValueError):
        with repo.scratch() as ws:
            (ws / "partial.js").write_text("x", encoding="utf-8")
            raise ValueError("boom")

    assert not ws.exists()


def test_discard_of_already_removed_workspace_is_ok(tmp_path: Path):
    repo = WorkspaceRepository(base_dir=tmp_path)
    ws = repo.create()
    shutil.rmtree(ws)

    assert repo.discard(ws) is True


def test_cleanup_failure_is_logged_not_raised(tmp_path: Path, monkeypatch, caplog):
    repo = WorkspaceRepository(base_dir=tmp_path)
    registered = []

    def failing_rmtree(path, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(shutil, "rmtree", failing_rmtree)
    monkeypatch.setattr("atexit.register", lambda fn, *a, **kw: registered.append(a))

    with repo.scratch() as ws:
        result = "primary outcome"

    assert result == "primary outcome"
    assert "Failed to delete scratch workspace" in caplog.text
    assert registered == [(str(ws),)]

    monkeypatch.undo()
    shutil.rmtree(ws)
