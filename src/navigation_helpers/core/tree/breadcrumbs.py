"""Breadcrumb trails: the chain of pages from the top of a container down to the active page."""

from navigation_helpers.config import UNBOUNDED_DEPTH
from navigation_helpers.core.tree.active import ActiveFinder
from navigation_helpers.protocols import ContainerProtocol, PageProtocol


def trail(active: PageProtocol, container: ContainerProtocol) -> tuple[PageProtocol, ...]:
    """Walk from the active page up to the given container.

    Returns pages ordered from the top-most ancestor to the active page. If the
    container is itself a page, it is the first entry.
    """
    pages = [active]
    node = active
    while (parent := node.parent) is not None:
        if not isinstance(parent, PageProtocol):
            break
        pages.append(parent)
        if parent is container:
            break
        node = parent
    pages.reverse()
    return tuple(pages)


def find_trail(
    finder: ActiveFinder,
    container: ContainerProtocol,
    min_depth: int = 0,
    max_depth: int = UNBOUNDED_DEPTH,
) -> tuple[PageProtocol, ...]:
    """Find the active page and return its trail, or () if nothing is active."""
    found = finder.find(container, min_depth, max_depth)
    if found is None:
        return ()
    return trail(found.page, container)
