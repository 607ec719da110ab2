"""Tests for the JSON reader that parses navigation configuration."""

import json
from pathlib import Path

import pytest

from navigation_helpers.core.importer.json_reader import (
    load_registry,
    parse_navigation_data,
    parse_navigation_file,
    parse_roles_file,
)
from navigation_helpers.errors import NavigationConfigError
from navigation_helpers.models.page import Navigation, Page


def test_parse_builds_tree_with_parents(site: Navigation) -> None:
    home, docs, hidden = site.pages
    assert (home.label, docs.label, hidden.label) == ("Home", "Docs", "Hidden")
    install, admin = docs.pages
    assert install.parent is docs
    assert docs.parent is site
    assert admin.resource == "admin"
    assert admin.privilege == "view"
    assert hidden.visible is False
    assert install.rel == {"next": "/docs/admin"}


def test_parse_accepts_mapping_with_pages() -> None:
    nav = parse_navigation_data({"pages": [{"label": "Home"}]})
    assert [p.label for p in nav] == ["Home"]


def test_unknown_keys_become_properties() -> None:
    nav = parse_navigation_data([{"label": "Home", "icon": "house", "order": 3}])
    assert nav.pages[0].properties == {"icon": "house", "order": 3}


def test_malformed_child_reports_its_path() -> None:
    data = [{"label": "Docs", "pages": [{"label": "ok"}, "oops"]}]
    with pytest.raises(NavigationConfigError, match=r"navigation\[0\]\.pages\[1\]"):
        parse_navigation_data(data)


def test_non_list_pages_raise() -> None:
    with pytest.raises(NavigationConfigError, match="expected a list"):
        parse_navigation_data([{"label": "Docs", "pages": {"label": "x"}}])
    with pytest.raises(NavigationConfigError, match="expected a list of pages"):
        parse_navigation_data("pages")


def test_parse_navigation_file(site_file: Path) -> None:
    nav = parse_navigation_file(site_file)
    assert len(nav) == 3


def test_registry_of_a_plain_list_is_default(site_file: Path) -> None:
    registry = load_registry(site_file)
    assert list(registry) == ["default"]


def test_registry_of_named_containers(tmp_path: Path) -> None:
    path = tmp_path / "containers.json"
    path.write_text(json.dumps({"main": [{"label": "Home"}], "footer": {"pages": []}}))
    registry = load_registry(path)
    assert sorted(registry) == ["footer", "main"]
    assert isinstance(registry["main"].pages[0], Page)
    assert len(registry["footer"]) == 0


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{")
    with pytest.raises(NavigationConfigError, match="invalid JSON"):
        load_registry(path)


def test_parse_roles_file(roles_file: Path) -> None:
    auth = parse_roles_file(roles_file)
    assert auth.is_granted("admin", "docs", "view") is True
    assert auth.is_granted("guest", "admin", "view") is False


def test_roles_file_must_be_a_mapping(tmp_path: Path) -> None:
    path = tmp_path / "roles.json"
    path.write_text("[]")
    with pytest.raises(NavigationConfigError, match="mapping of roles"):
        parse_roles_file(path)


def test_invalid_utf8_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"label": "\xff"}]')
    with pytest.raises(NavigationConfigError, match="not valid UTF-8"):
        parse_navigation_file(path)


def test_non_boolean_flag_in_file_reports_its_path(tmp_path: Path) -> None:
    path = tmp_path / "nav.json"
    path.write_text(json.dumps([{"label": "Docs", "pages": [{"label": "a", "active": "true"}]}]))
    with pytest.raises(NavigationConfigError, match=r"nav\.json\[0\]\.pages\[0\]\.active"):
        parse_navigation_file(path)
