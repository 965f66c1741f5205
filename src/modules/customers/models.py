"""Customer entity.

The record lives in the in-memory repository, which assigns ``id`` on
first save.  ``__str__`` masks the CPF so the entity is safe to log.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:
    """Customer aggregate root."""

    name: str
    email: str
    cpf: str
    id: int | None = None

    @property
    def cpf_suffix(self) -> str:
        return self.cpf[-4:] if self.cpf else "????"

    def __str__(self) -> str:
        return f"{self.name} (CPF: ***{self.cpf_suffix})"
