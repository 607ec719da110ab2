"""Protocols for the collaborators of the navigation helpers."""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContainerProtocol(Protocol):
    """An ordered, iterable collection of pages."""

    @property
    def pages(self) -> tuple["PageProtocol", ...]: ...

    def __iter__(self) -> Iterator["PageProtocol"]:
        """Iterate over the direct child pages, in order."""
        ...


@runtime_checkable
class PageProtocol(Protocol):
    """A navigation page. A page is also a container of its child pages."""

    @property
    def active(self) -> bool: ...

    @property
    def visible(self) -> bool: ...

    @property
    def resource(self) -> str | None: ...

    @property
    def privilege(self) -> str | None: ...

    @property
    def parent(self) -> "PageProtocol | ContainerProtocol | None": ...

    @property
    def pages(self) -> tuple["PageProtocol", ...]: ...

    def __iter__(self) -> Iterator["PageProtocol"]:
        """Iterate over the direct child pages, in order."""
        ...


@runtime_checkable
class AcceptProtocol(Protocol):
    """Decides whether a page takes part in a search or rendering."""

    def accept(self, page: PageProtocol) -> bool:
        """Return True if the page should be considered."""
        ...


@runtime_checkable
class AuthorizationProtocol(Protocol):
    """Role based authorization used by the acceptor."""

    def is_granted(self, role: str, resource: str, privilege: str | None) -> bool:
        """Return True if the role holds the privilege on the resource."""
        ...
