"""Domain-level exceptions.

Every failure a workflow can raise is a subclass of DomainException so the
CLI layer can catch them uniformly and display the message as-is.  A
missing order is *not* an exception: the workflows return ``None`` for it.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field or invariant of an entity was violated."""


class EmptyOrderError(ValidationError):
    """An order was built without any line items."""


class InvalidTransitionError(DomainException):
    """The order state machine refused a status change."""


class IllegalCancellationError(DomainException):
    """A delivered order cannot be cancelled."""


class IllegalTransitionRequestError(DomainException):
    """CANCELLED was requested through the generic status update path."""


class ProductNotFoundError(DomainException):
    """The product catalog has no product with the requested id."""


class InsufficientStockError(DomainException):
    """The product catalog holds fewer units than were requested."""


class EntityNotFoundError(DomainException):
    """A repository was asked to update an entity it does not hold."""


class ProductServiceError(DomainException):
    """The remote product service could not answer a stock query."""
