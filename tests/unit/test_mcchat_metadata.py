"""Sanity checks for project metadata."""

from __future__ import annotations

from pathlib import Path
import tomllib


def _load_pyproject() -> dict:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def _load_project_dependencies() -> list[str]:
    data = _load_pyproject()
    return list(data["project"]["dependencies"])


def test_runtime_stack_is_declared() -> None:
    deps = _load_project_dependencies()
    for name in ("pydantic", "PyYAML", "rich", "structlog", "typer"):
        assert any(dep.startswith(name) for dep in deps), name


def test_pytest_is_a_dev_extra_only() -> None:
    data = _load_pyproject()
    assert not any(dep.startswith("pytest") for dep in data["project"]["dependencies"])
    assert any(dep.startswith("pytest") for dep in data["project"]["optional-dependencies"]["dev"])


def test_markers_are_registered() -> None:
    markers = _load_pyproject()["tool"]["pytest"]["ini_options"]["markers"]
    names = {marker.split(":", 1)[0] for marker in markers}
    assert {"unit_common", "unit_chat", "unit_ui"} <= names


def test_console_script_points_at_cli() -> None:
    assert _load_pyproject()["project"]["scripts"]["mcchat"] == "mc_ui.cli:main"
