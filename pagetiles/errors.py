"""Error taxonomy for tiles dispatch.

Anything not listed here (controller failures, template errors) is raised by
the code that failed and passes through untouched.
"""


class TilesError(Exception):
    """Base class for pagetiles errors."""


class ConfigurationError(TilesError):
    """A required collaborator or configuration entry is missing.

    Raised for startup misconfiguration: no definitions registry, no template
    environment, unknown result types, controllers that cannot be loaded.
    """


class NotFoundError(TilesError):
    """Requested resource does not exist. Surfaces as HTTP 404."""


class DefinitionNotFoundError(NotFoundError):
    """No tiles definition (or no usable path) for a requested name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name
