"""Acceptance of pages by visibility and authorization."""

from navigation_helpers.protocols import AuthorizationProtocol, PageProtocol


class AcceptHelper:
    """Decides whether a page should be considered when iterating a navigation tree.

    Rules:
    - An invisible page is not accepted, unless ``render_invisible`` is set.
    - With an authorization, a role and a page resource, the page is accepted
      only if the authorization grants the page privilege to the role.
    - With ``recursive``, an accepted page is still rejected when its parent
      page is not accepted.
    """

    def __init__(
        self,
        authorization: AuthorizationProtocol | None = None,
        *,
        render_invisible: bool = False,
        role: str | None = None,
    ) -> None:
        self.authorization = authorization
        self.render_invisible = render_invisible
        self.role = role

    def accept(self, page: PageProtocol, *, recursive: bool = True) -> bool:
        node = page
        while self._accept_page(node):
            if not recursive:
                return True
            parent = node.parent
            if not isinstance(parent, PageProtocol):
                return True
            node = parent
        return False

    def _accept_page(self, page: PageProtocol) -> bool:
        if not page.visible and not self.render_invisible:
            return False

        resource = page.resource
        if self.authorization is not None and self.role is not None and resource is not None:
            return self.authorization.is_granted(self.role, resource, page.privilege)
        return True
