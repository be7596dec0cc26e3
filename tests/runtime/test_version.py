"""Tests for runtime.version helpers."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path

import pytest

from hybrid_collage.runtime import version as runtime_version


def _not_installed(_name: str) -> str:
    raise importlib_metadata.PackageNotFoundError


def test_installed_version_preferred(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", lambda _name: "9.9.9",
    )
    assert runtime_version.resolve_project_version() == "9.9.9"


def test_falls_back_to_pyproject(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "x"\nversion = " 1.2.3 "\n', encoding="utf-8",
    )
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _not_installed,
    )
    monkeypatch.setattr(
        runtime_version, "_find_pyproject", lambda _start: pyproject,
    )
    assert runtime_version.resolve_project_version() == "1.2.3"


def test_dev_version_without_metadata(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _not_installed,
    )
    monkeypatch.setattr(
        runtime_version, "_find_pyproject", lambda _start: None,
    )
    assert runtime_version.resolve_project_version() == "0.0.0"


def test_unparseable_pyproject_warns(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[project\nversion=", encoding="utf-8")
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _not_installed,
    )
    monkeypatch.setattr(
        runtime_version, "_find_pyproject", lambda _start: pyproject,
    )
    assert runtime_version.resolve_project_version() == "0.0.0"
    assert "Error reading" in caplog.text


def test_find_pyproject_walks_up(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    start = tmp_path / "a" / "b" / "mod.py"
    start.parent.mkdir(parents=True)
    start.write_text("", encoding="utf-8")
    assert runtime_version._find_pyproject(start) == (  # noqa: SLF001
        tmp_path / "pyproject.toml"
    )
