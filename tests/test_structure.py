# tests/test_structure.py

import importlib


def test_imports():
    """Test that all necessary modules can be imported"""
    # Test core imports
    assert importlib.import_module("app.core.database")
    assert importlib.import_module("app.core.store")
    assert importlib.import_module("app.services.confession_service")
    assert importlib.import_module("app.routes.confessions")
    assert importlib.import_module("app.client.console")

    # Test that schemas are accessible through __init__
    from app.data_schemas import Confession, ConfessionRow
    assert Confession
    assert ConfessionRow


def test_routes_registered(app):
    paths = app.openapi()["paths"]
    assert set(paths["/api/confessions"]) == {"get", "post"}
    assert set(paths["/api/confessions/{confession_id}/like"]) == {"post"}
    assert "/health" in paths


def test_error_responses_documented(app):
    paths = app.openapi()["paths"]
    create = paths["/api/confessions"]["post"]["responses"]
    like = paths["/api/confessions/{confession_id}/like"]["post"]["responses"]

    assert create["400"]["content"]["application/json"]["schema"]["$ref"].endswith(
        "/ErrorResponse"
    )
    assert {"404", "500"} <= set(like)
