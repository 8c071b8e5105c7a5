"""Pytest configuration and fixtures."""

import textwrap

import pytest
from PIL import Image

from cutscene_importer.instruction_definitions.config import ImporterConfig, reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the global config singleton and CUTSCENE_* variables out of tests."""
    for name in ("CUTSCENE_PROJECT_ROOT", "CUTSCENE_USER_DIR", "CUTSCENE_MAX_RULE_DEPTH", "CUTSCENE_DEFINITION_GLOB"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def importer_config(tmp_path):
    """Config whose virtual roots point into the test's temp directory."""
    project_root = tmp_path / "project"
    user_dir = tmp_path / "user"
    project_root.mkdir()
    user_dir.mkdir()
    return ImporterConfig(project_root=project_root, user_dir=user_dir)


@pytest.fixture
def write_definition(tmp_path):
    """Write an instruction definition file and return its path."""

    def _write(body: str, name: str = "definition.xml", folder=None):
        folder = folder or tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(f"<definition>{textwrap.dedent(body)}</definition>", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_png():
    """Write a small solid-color PNG and return its path."""

    def _write(path, size=(4, 2), color=(255, 0, 0, 255)):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, color).save(path, format="PNG")
        return path

    return _write
