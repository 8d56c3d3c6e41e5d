"""
Repository Pattern -- in-memory client directory.

The workflows never call it; callers use it to assemble the
(client, route) pair before invoking them.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import replace
from typing import Optional

from cabbooking.domain.entities import Client
from cabbooking.domain.errors import ClientNotFoundError, InvalidClientError

logger = logging.getLogger(__name__)


class InMemoryClientDirectory:
    def __init__(self) -> None:
        self._clients: dict[int, Client] = {}
        self._ids = itertools.count(1)

    def find_by_id(self, client_id: int) -> Optional[Client]:
        if client_id <= 0:
            return None
        client = self._clients.get(client_id)
        return replace(client) if client else None

    def find_all(self) -> list[Client]:
        return [replace(c) for c in self._clients.values()]

    def add(
        self,
        *,
        name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        credit_card: Optional[str] = None,
    ) -> Client:
        self._require_contact_details(name, email)
        client = Client(
            id=next(self._ids),
            name=name.strip(),
            email=email.strip(),
            phone=phone,
            address=address,
            credit_card=credit_card,
        )
        self._clients[client.id] = client
        logger.info("New client created: %s (%s)", client.name, client.email)
        return replace(client)

    def update(self, client: Client) -> Client:
        if client.id not in self._clients:
            raise ClientNotFoundError(f"Client with ID {client.id} not found")
        self._require_contact_details(client.name, client.email)
        self._clients[client.id] = replace(client)
        logger.info("Client %s (%s) updated", client.id, client.name)
        return replace(client)

    def delete(self, client_id: int) -> None:
        if self._clients.pop(client_id, None) is None:
            raise ClientNotFoundError(f"Client with ID {client_id} not found")
        logger.info("Client %s deleted", client_id)

    @staticmethod
    def _require_contact_details(name: Optional[str], email: Optional[str]) -> None:
        if not name or not name.strip():
            raise InvalidClientError("Client name is required")
        if not email or not email.strip():
            raise InvalidClientError("Client email is required")
