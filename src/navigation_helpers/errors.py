"""Exceptions raised by the navigation helpers."""


class NavigationError(Exception):
    """Base class for all navigation helper errors."""


class InvalidPageError(NavigationError):
    """A page cannot be placed where it was asked to go."""


class InvalidRelationError(NavigationError, ValueError):
    """A relation attribute other than 'rel' or 'rev' was requested."""


class ContainerNotFoundError(NavigationError, KeyError):
    """No container is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvalidContainerError(NavigationError, TypeError):
    """The value given as a container is neither a name nor a container."""


class NavigationConfigError(NavigationError, ValueError):
    """Navigation configuration data is malformed."""
