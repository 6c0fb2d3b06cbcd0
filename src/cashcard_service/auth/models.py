"""
cashcard_service.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
- Define the role names the access policy understands.
"""

from __future__ import annotations

from dataclasses import dataclass

CARD_OWNER = "card-owner"
NON_OWNER = "non-owner"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.

    `subject` is the username; it is also the value stored in `CashCard.owner`.
    """

    subject: str
    roles: frozenset[str]

    def has_role(self, role: str) -> bool:
        return role in self.roles
