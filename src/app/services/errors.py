"""Errors raised by the customer, supply and billing services."""


class ValidationError(ValueError):
    """Required customer details are missing or malformed."""


class NotFoundError(LookupError):
    """No customer exists with the requested id."""

    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer '{customer_id}' not found")
        self.customer_id = customer_id
