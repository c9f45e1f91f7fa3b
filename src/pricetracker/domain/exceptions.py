"""Domain-level exceptions.

All rule violations and collaborator failures are expressed as subclasses
of DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a value breaks an invariant."""


class EntityNotFoundError(DomainException):
    """A requested price record or store does not exist."""


class BackendUnavailable(DomainException):
    """The record store could not serve a read, write or subscription."""
