"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from navigation_helpers.core.importer.json_reader import parse_navigation_data
from navigation_helpers.models.page import Navigation

# Deepest active page: Linux (depth 2). Hidden is invisible, Admin guide needs the admin resource.
SITE: list[dict[str, Any]] = [
    {"label": "Home", "uri": "/"},
    {
        "label": "Docs",
        "uri": "/docs",
        "active": True,
        "pages": [
            {
                "label": "Install",
                "uri": "/docs/install",
                "rel": {"next": "/docs/admin"},
                "pages": [
                    {"label": "Linux", "uri": "/docs/install/linux", "active": True},
                ],
            },
            {
                "label": "Admin guide",
                "uri": "/docs/admin",
                "resource": "admin",
                "privilege": "view",
                "active": True,
            },
        ],
    },
    {
        "label": "Hidden",
        "uri": "/hidden",
        "visible": False,
        "active": True,
        "pages": [{"label": "Secret", "uri": "/hidden/secret", "active": True}],
    },
]

ROLES: dict[str, Any] = {
    "guest": {"permissions": ["docs:*"]},
    "admin": {"permissions": ["admin:*"], "inherits": ["guest"]},
}


@pytest.fixture
def site() -> Navigation:
    """Return the sample site navigation."""
    return parse_navigation_data(SITE)


@pytest.fixture
def site_file(tmp_path: Path) -> Path:
    """Write the sample site to a navigation file and return its path."""
    path = tmp_path / "navigation.json"
    path.write_text(json.dumps(SITE))
    return path


@pytest.fixture
def roles_file(tmp_path: Path) -> Path:
    path = tmp_path / "roles.json"
    path.write_text(json.dumps(ROLES))
    return path
