"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class InvalidCustomerData(Exception):
    """A customer field was rejected by its validator.

    ``field`` names the offending field (``cpf``, ``email`` or ``name``).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class CustomerAlreadyExists(Exception):
    """Another customer is already registered with the same CPF."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""
