"""Domain-level exceptions.

Expected business-rule violations are never raised: aggregate operations
return a failed ``Result`` instead.  The exceptions here cover the other
two categories: caller defects (``GuardError``) and conditions raised by
the persistence collaborator.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class GuardError(DomainException):
    """A fatal precondition was violated by the caller.

    Raised for programming errors such as passing ``None`` where a value
    object is mandatory. Not meant to be recovered from.
    """


class CurrencyMismatchError(GuardError):
    """Two Money values with different currencies were combined."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine {left} with {right}")


class UnsupportedCurrencyError(GuardError):
    """A currency code outside the supported set was requested."""


class ConcurrencyError(DomainException):
    """An aggregate was modified by someone else since it was loaded."""
