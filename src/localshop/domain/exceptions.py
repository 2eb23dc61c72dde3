"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and turn them into
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request broke a business rule (e.g. an order without items)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """Writing to the store failed."""


class ServiceUnreachableError(DomainException):
    """The shop service could not be reached over the network."""


class CheckoutRejectedError(DomainException):
    """The shop service answered a checkout with a non-success status."""
