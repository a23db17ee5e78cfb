"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Not found ---------------------------------------------------------------


class ProductNotFoundError(EntityNotFoundError):
    """The catalog has no product with the requested ID."""


class CouponNotFoundError(EntityNotFoundError):
    """The coupon does not exist or belongs to another member."""


class OrderNotFoundError(EntityNotFoundError):
    """The requested order does not exist."""


# --- Pricing and coupon rules ------------------------------------------------


class PriceMismatchError(ValidationError):
    """The submitted total no longer matches current catalog prices."""


class BelowMinimumError(ValidationError):
    """The total is below the coupon's minimum qualifying amount."""


class DiscountExceedsTotalError(ValidationError):
    """The coupon discount is larger than the total it applies to."""


class CouponAlreadyUsedError(ValidationError):
    """The coupon has already been spent on an earlier order."""
