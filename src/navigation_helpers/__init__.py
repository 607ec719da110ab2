"""Navigation helpers: active page resolution for hierarchical site navigation."""

from navigation_helpers.core.accept import AcceptHelper
from navigation_helpers.core.tree.active import ActiveFinder
from navigation_helpers.models.page import ActivePage, Navigation, Page
from navigation_helpers.protocols import (
    AcceptProtocol,
    AuthorizationProtocol,
    ContainerProtocol,
    PageProtocol,
)

__all__ = [
    "AcceptHelper",
    "AcceptProtocol",
    "ActiveFinder",
    "ActivePage",
    "AuthorizationProtocol",
    "ContainerProtocol",
    "Navigation",
    "Page",
    "PageProtocol",
]
