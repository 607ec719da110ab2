"""Parse navigation configuration (JSON) into navigation trees."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from navigation_helpers.core.authorization import RoleAuthorization
from navigation_helpers.errors import NavigationConfigError
from navigation_helpers.models.page import Navigation, Page


def parse_navigation_data(data: Any, *, path: str = "navigation") -> Navigation:
    """Build a navigation tree from a list of page mappings or ``{"pages": [...]}``.

    Raises:
        NavigationConfigError: if the data or any page in it is malformed.
    """
    if isinstance(data, Mapping):
        data = data.get("pages", [])
        path = f"{path}.pages"
    if not isinstance(data, list):
        msg = f"{path}: expected a list of pages, got {type(data).__name__}"
        raise NavigationConfigError(msg)

    navigation = Navigation(
        [Page.from_dict(item, path=f"{path}[{i}]") for i, item in enumerate(data)]
    )
    logger.debug("Parsed {} pages from {}", sum(1 for _ in navigation.iter_pages()), path)
    return navigation


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        msg = f"{path}: not valid UTF-8: {e}"
        raise NavigationConfigError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"{path}: invalid JSON: {e}"
        raise NavigationConfigError(msg) from e
    except RecursionError as e:
        msg = f"{path}: nested too deeply"
        raise NavigationConfigError(msg) from e


def parse_navigation_file(path: Path) -> Navigation:
    """Read a single navigation tree from a JSON file."""
    return parse_navigation_data(_read_json(path), path=path.name)


def load_registry(path: Path) -> dict[str, Navigation]:
    """Read named navigation containers from a JSON file.

    The top level is either a single navigation (a list of pages, or a mapping
    with ``pages``), registered as ``"default"``, or a mapping of container
    names to navigations.
    """
    data = _read_json(path)
    if isinstance(data, list) or (isinstance(data, Mapping) and "pages" in data):
        return {"default": parse_navigation_data(data, path=path.name)}
    if not isinstance(data, Mapping):
        msg = f"{path.name}: expected a list or a mapping, got {type(data).__name__}"
        raise NavigationConfigError(msg)

    registry = {
        str(name): parse_navigation_data(pages, path=f"{path.name}:{name}")
        for name, pages in data.items()
    }
    logger.debug("Loaded containers {} from {}", sorted(registry), path)
    return registry


def parse_roles_file(path: Path) -> RoleAuthorization:
    """Read role definitions (``{role: {"permissions": [...], "inherits": [...]}}``)."""
    data = _read_json(path)
    if not isinstance(data, Mapping):
        msg = f"{path.name}: expected a mapping of roles, got {type(data).__name__}"
        raise NavigationConfigError(msg)
    return RoleAuthorization.from_config(data)
