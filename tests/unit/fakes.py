"""Fake collaborators for testing the navigation helpers."""

from navigation_helpers.protocols import PageProtocol


class FakeAcceptor:
    """Acceptor that rejects a fixed set of pages and records every call."""

    def __init__(self, rejected: list[PageProtocol] | None = None) -> None:
        self.rejected = list(rejected or [])
        self.calls: list[PageProtocol] = []

    def accept(self, page: PageProtocol) -> bool:
        """Record the call; accept unless the page was registered as rejected."""
        self.calls.append(page)
        return not any(page is r for r in self.rejected)


class FakeAuthorization:
    """Authorization granting a fixed set of (role, resource, privilege) triples."""

    def __init__(self, grants: set[tuple[str, str, str | None]] | None = None) -> None:
        self.grants = set(grants or set())
        self.calls: list[tuple[str, str, str | None]] = []

    def is_granted(self, role: str, resource: str, privilege: str | None) -> bool:
        self.calls.append((role, resource, privilege))
        return (role, resource, privilege) in self.grants
