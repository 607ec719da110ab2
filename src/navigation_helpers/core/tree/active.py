"""Active page resolution: find the deepest active page in a navigation tree."""

from loguru import logger

from navigation_helpers.config import UNBOUNDED_DEPTH
from navigation_helpers.models.page import ActivePage
from navigation_helpers.protocols import AcceptProtocol, ContainerProtocol, PageProtocol


class ActiveFinder:
    """Finds the deepest accepted, active page in a navigation tree.

    The acceptor is consulted exactly once for every page the search visits.
    """

    def __init__(self, acceptor: AcceptProtocol) -> None:
        self.acceptor = acceptor

    def find(
        self,
        container: ContainerProtocol,
        min_depth: int = 0,
        max_depth: int = UNBOUNDED_DEPTH,
    ) -> ActivePage | None:
        """Find the deepest active page in the given container.

        The search is depth-first and left to right, starting at depth 0 with the
        container's direct children. Pages the acceptor rejects are skipped along
        with their whole subtree. Inactive pages are still searched below. A deeper
        active page wins over a shallower one; at equal depth the first one found
        wins.

        Args:
            container: The container to search.
            min_depth: Minimum depth the found page must have. Negative means 0.
            max_depth: Maximum depth to descend to. Negative means unbounded.

        Returns:
            The active page with its depth, or None if there is none within bounds.
        """
        min_depth = max(min_depth, 0)
        found: PageProtocol | None = None
        found_depth = -1

        # Children are pushed in reverse so the stack pops them in order.
        stack: list[tuple[PageProtocol, int]] = [(p, 0) for p in reversed(list(container))]
        while stack:
            page, depth = stack.pop()
            if not self.acceptor.accept(page):
                continue

            if depth > found_depth and page.active:
                found, found_depth = page, depth

            if max_depth < 0 or depth < max_depth:
                stack.extend((child, depth + 1) for child in reversed(list(page)))

        if found is None or found_depth < min_depth:
            logger.debug(
                "No active page (deepest depth {}, min {}, max {})",
                found_depth,
                min_depth,
                max_depth,
            )
            return None

        logger.debug("Active page {!r} at depth {}", found, found_depth)
        return ActivePage(page=found, depth=found_depth)
