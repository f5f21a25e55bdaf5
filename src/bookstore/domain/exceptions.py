"""Domain-level exceptions.

All failures the order workflow can report are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidParameterError(DomainException):
    """User-supplied input broke a business rule. Not retried."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The storage layer failed to commit, roll back or connect.

    The underlying driver error is kept as ``__cause__``.
    """


class TransactionFailedError(DomainException):
    """A step inside the transaction failed and was rolled back.

    Nothing was persisted, so retrying the same request is safe.
    """
