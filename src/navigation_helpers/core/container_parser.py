"""Resolve container arguments (names or instances) to navigation containers."""

from collections.abc import Mapping
from typing import overload

from loguru import logger

from navigation_helpers.config import DEFAULT_CONTAINER_NAMES
from navigation_helpers.errors import ContainerNotFoundError, InvalidContainerError
from navigation_helpers.protocols import ContainerProtocol


class ContainerParser:
    """Looks up containers by name in a registry of named containers."""

    def __init__(self, registry: Mapping[str, ContainerProtocol]) -> None:
        self.registry = registry

    @overload
    def parse(self, container: str) -> ContainerProtocol: ...

    @overload
    def parse(self, container: ContainerProtocol | None = None) -> ContainerProtocol | None: ...

    def parse(self, container: ContainerProtocol | str | None = None) -> ContainerProtocol | None:
        """Resolve ``container`` to a container instance.

        ``None`` and container instances are returned unchanged. The names
        ``"default"`` and ``"navigation"`` both resolve to the default container,
        registered under either name (``"default"`` is tried first).

        Raises:
            ContainerNotFoundError: if no container is registered under the name.
            InvalidContainerError: if ``container`` is neither a name nor a container.
        """
        if container is None:
            return None

        if isinstance(container, str):
            names = (
                DEFAULT_CONTAINER_NAMES if container in DEFAULT_CONTAINER_NAMES else (container,)
            )
            for name in names:
                if name in self.registry:
                    logger.debug("Resolved container {!r} as {!r}", container, name)
                    return self.registry[name]
            msg = f'Could not load Container "{container}"'
            raise ContainerNotFoundError(msg)

        if isinstance(container, ContainerProtocol):
            return container

        msg = (
            "Container must be a string alias or a container, "
            f"got {type(container).__name__}"
        )
        raise InvalidContainerError(msg)
