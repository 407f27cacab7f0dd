"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value does not satisfy the entity's invariants."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class RepositoryLoadError(DomainException):
    """A data source could not be read or parsed at construction time."""


class ConfigurationError(DomainException):
    """Required configuration is missing or invalid."""
