"""Engine error types."""


class InvalidLoanParameters(ValueError):
    """Raised when principal, rate or term is not strictly positive."""
