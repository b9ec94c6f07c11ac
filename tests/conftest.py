"""Shared fixtures: a temporary static root and an app serving it."""

from pathlib import Path

import pytest

from mdserver.app import create_app
from mdserver.config import Settings

TEMPLATE = "<!DOCTYPE html><html><head><title>{{title}}</title></head><body>{{content}}</body></html>"


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def settings(static_root: Path) -> Settings:
    return Settings(static_root=static_root)


@pytest.fixture
def app(settings: Settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def templated_client(settings: Settings, static_root: Path):
    """Client for an app started with ``template.html`` present."""
    (static_root / "template.html").write_text(TEMPLATE, encoding="utf-8")
    app = create_app(settings)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def report(static_root: Path) -> Path:
    path = static_root / "report.md"
    path.write_text("---\ntitle: Report\n---\n## Summary\n\nAll good.\n", encoding="utf-8")
    return path
