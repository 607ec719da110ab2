"""Find the root container of a page."""

from navigation_helpers.protocols import ContainerProtocol, PageProtocol


class RootFinder:
    """Finds, and remembers, the root container a page belongs to.

    A root set with ``set_root`` stops the upward walk, so callers rendering a
    sub-container never see pages above it.
    """

    def __init__(self) -> None:
        self.root: ContainerProtocol | None = None

    def set_root(self, root: ContainerProtocol | None) -> None:
        self.root = root

    def find(self, page: PageProtocol) -> ContainerProtocol:
        """Return the remembered root, or walk up from the page to find it."""
        if self.root is not None:
            return self.root

        root: ContainerProtocol = page
        while (parent := page.parent) is not None:
            root = parent
            if not isinstance(parent, PageProtocol):
                break
            page = parent

        self.root = root
        return root
