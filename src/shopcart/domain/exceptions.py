"""Domain-level exceptions.

Expected cart conditions (short stock, missing line, locked discount) are
reported through ``CartOutcome`` and never raised.  These exceptions cover
broken invariants only: a malformed catalog entry or bad settings, which
the CLI turns into a startup error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value violates a model invariant."""


class EntityNotFoundError(DomainException):
    """A referenced catalog entry does not exist."""
