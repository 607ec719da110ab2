"""Page relations (``rel``/``rev`` properties) and conversion of values to pages."""

from collections.abc import Mapping
from typing import Any

from navigation_helpers.errors import InvalidRelationError
from navigation_helpers.models.page import Page
from navigation_helpers.protocols import AcceptProtocol, ContainerProtocol, PageProtocol

_RELATIONS = ("rel", "rev")


def convert_to_pages(value: Any, *, recursive: bool = True) -> list[PageProtocol]:
    """Convert a relation value into a list of pages.

    - a page is returned as the only element
    - a string becomes a page with that uri
    - a mapping is passed to ``Page.from_dict``
    - a list or tuple (only when ``recursive``) converts each element on its own
      and keeps the first page of each
    - any other container yields its pages

    Empty and unsupported values give an empty list.
    """
    if isinstance(value, PageProtocol):
        return [value]

    if isinstance(value, str):
        return [Page(uri=value)] if value else []

    if isinstance(value, Mapping):
        return [Page.from_dict(value)] if value else []

    if isinstance(value, (list, tuple)):
        if not recursive:
            return []
        pages: list[PageProtocol] = []
        for item in value:
            converted = convert_to_pages(item, recursive=False)
            if converted:
                pages.append(converted[0])
        return pages

    if isinstance(value, ContainerProtocol):
        return [p for p in value if isinstance(p, PageProtocol)]

    return []


class RelationFinder:
    """Finds the related pages a page declares in its ``rel`` or ``rev`` properties."""

    def __init__(self, acceptor: AcceptProtocol) -> None:
        self.acceptor = acceptor

    def find(self, page: Page, rel: str, type_: str) -> list[PageProtocol]:
        """Return the accepted pages related to ``page`` by link type ``type_``.

        Args:
            page: Page to find relations for.
            rel: Relation attribute, ``"rel"`` or ``"rev"``.
            type_: Link type, e.g. ``"start"`` or ``"next"``.

        Raises:
            InvalidRelationError: if ``rel`` is not ``"rel"`` or ``"rev"``.
        """
        if rel not in _RELATIONS:
            msg = f'Invalid relation attribute "{rel}", must be "rel" or "rev"'
            raise InvalidRelationError(msg)

        relations: dict[str, Any] = getattr(page, rel)
        value = relations.get(type_)
        if not value:
            return []

        return [p for p in convert_to_pages(value) if self.acceptor.accept(p)]
