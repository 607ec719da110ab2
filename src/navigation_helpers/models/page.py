"""Navigation tree models: pages, the root container and search results."""

import weakref
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from navigation_helpers.errors import InvalidPageError, NavigationConfigError
from navigation_helpers.protocols import PageProtocol

# Keys of a page mapping that map to page attributes. Everything else is a custom property.
_PAGE_KEYS = frozenset(
    {"label", "uri", "active", "visible", "resource", "privilege", "rel", "rev", "pages"}
)


class _Container:
    """Ordered child pages, shared by Navigation and Page."""

    def __init__(self) -> None:
        self._pages: list[Page] = []

    def __iter__(self) -> Iterator["Page"]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, page: object) -> bool:
        return any(p is page for p in self._pages)

    @property
    def parent(self) -> Union["Page", "Navigation", None]:
        return None

    @property
    def pages(self) -> tuple["Page", ...]:
        return tuple(self._pages)

    def add_page(self, page: "Page") -> "Page":
        """Append a page as the last child, detaching it from any previous parent.

        Raises:
            InvalidPageError: if the page is this container or one of its ancestors.
        """
        node: _Container | None = self
        while node is not None:
            if node is page:
                msg = f"Cannot add {page!r} below itself"
                raise InvalidPageError(msg)
            node = node.parent

        previous = page.parent
        if previous is not None:
            previous.remove_page(page)
        self._pages.append(page)
        page._parent_ref = weakref.ref(self)
        return page

    def add_pages(self, pages: "list[Page] | tuple[Page, ...]") -> None:
        for page in pages:
            self.add_page(page)

    def remove_page(self, page: "Page") -> bool:
        """Detach a direct child. Returns False if it was not a child."""
        for i, candidate in enumerate(self._pages):
            if candidate is page:
                del self._pages[i]
                page._parent_ref = None
                return True
        return False

    def iter_pages(self) -> Iterator["Page"]:
        """Iterate over all descendant pages, depth-first, in order."""
        stack = list(reversed(self._pages))
        while stack:
            page = stack.pop()
            yield page
            stack.extend(reversed(page._pages))


class Navigation(_Container):
    """The root container of a navigation tree."""

    def __init__(self, pages: "list[Page] | tuple[Page, ...]" = ()) -> None:
        super().__init__()
        self.add_pages(pages)

    def __repr__(self) -> str:
        return f"Navigation(pages={len(self._pages)})"


class Page(_Container):
    """A single navigation page. A page is also the container of its children.

    The parent is held as a weak reference, so a page never keeps its
    enclosing container alive.
    """

    def __init__(
        self,
        label: str = "",
        uri: str = "",
        *,
        active: bool = False,
        visible: bool = True,
        resource: str | None = None,
        privilege: str | None = None,
        rel: dict[str, Any] | None = None,
        rev: dict[str, Any] | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.label = label
        self.uri = uri
        self.active = active
        self.visible = visible
        self.resource = resource
        self.privilege = privilege
        self.rel: dict[str, Any] = dict(rel or {})
        self.rev: dict[str, Any] = dict(rev or {})
        self.properties: dict[str, Any] = dict(properties or {})
        self._parent_ref: weakref.ReferenceType[_Container] | None = None

    def __repr__(self) -> str:
        return f"Page(label={self.label!r}, uri={self.uri!r})"

    @property
    def parent(self) -> Union["Page", Navigation, None]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()  # type: ignore[return-value]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, path: str = "page") -> "Page":
        """Build a page and its subtree (under ``pages``) from a configuration mapping.

        Args:
            data: Page configuration.
            path: Location of ``data`` in the configuration, used in error messages.

        Raises:
            NavigationConfigError: if the mapping or one of its child entries is malformed.
        """
        root = cls._build(data, path=path)
        stack = [(root, data, path)]
        while stack:
            page, entry, entry_path = stack.pop()
            children = entry.get("pages", [])
            if not isinstance(children, list):
                msg = f"{entry_path}.pages: expected a list, got {type(children).__name__}"
                raise NavigationConfigError(msg)
            for i, child in enumerate(children):
                child_path = f"{entry_path}.pages[{i}]"
                child_page = page.add_page(cls._build(child, path=child_path))
                stack.append((child_page, child, child_path))
        return root

    @classmethod
    def _build(cls, data: Any, *, path: str) -> "Page":
        """Build a single page, without its children."""
        if not isinstance(data, Mapping):
            msg = f"{path}: expected a mapping, got {type(data).__name__}"
            raise NavigationConfigError(msg)

        for key in ("rel", "rev"):
            if not isinstance(data.get(key) or {}, Mapping):
                msg = f"{path}.{key}: expected a mapping"
                raise NavigationConfigError(msg)

        return cls(
            label=_text(data, "label"),
            uri=_text(data, "uri"),
            active=_flag(data, "active", default=False, path=path),
            visible=_flag(data, "visible", default=True, path=path),
            resource=data.get("resource"),
            privilege=data.get("privilege"),
            rel=dict(data.get("rel") or {}),
            rev=dict(data.get("rev") or {}),
            properties={k: v for k, v in data.items() if k not in _PAGE_KEYS},
        )


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _flag(data: Mapping[str, Any], key: str, *, default: bool, path: str) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"{path}.{key}: expected true or false, got {value!r}"
        raise NavigationConfigError(msg)
    return value


@dataclass(frozen=True)
class ActivePage:
    """The deepest active page found by a search, with its depth below the search root."""

    page: PageProtocol
    depth: int
