import importlib
import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import main
from services.assets import INDEX_ASSET, STATIC_DIR, mapping_lookup

client = TestClient(main.app)


def test_home_serves_bundled_page():
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/html; charset=utf-8"
    assert r.content == (STATIC_DIR / INDEX_ASSET).read_bytes()


def test_create_app_without_bundled_page():
    app = main.create_app("configured message", mapping_lookup({}))
    r = TestClient(app).get("/")
    assert r.status_code == 200
    assert r.text == "configured message"


def test_cors_preflight():
    r = client.options(
        "/",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_import_does_not_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    importlib.reload(main)
    assert calls == []


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    main.configure_logging("DEBUG")
    assert calls == [{"level": "DEBUG", "format": main.LOG_FORMAT}]


def test_index_page_shipped_as_package_data():
    tomllib = pytest.importorskip("tomllib")
    root = Path(__file__).resolve().parent.parent
    with open(root / "pyproject.toml", "rb") as f:
        setuptools_cfg = tomllib.load(f)["tool"]["setuptools"]
    assert "static*" in setuptools_cfg["packages"]["find"]["include"]
    assert "*.html" in setuptools_cfg["package-data"]["static"]
    assert (STATIC_DIR / INDEX_ASSET).parent == root / "static"
