"""Customer repository interface.

Extends ``IRepository[Customer]`` with the CPF look-up required by
the uniqueness rule (one customer per CPF).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ContextManager, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF, formatted or bare."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Hold the store exclusively for a check-then-write sequence."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every customer and reset id assignment."""
