from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, List, Optional, Union

import pydantic

from onion_registry.crypto import export_private_key, generate_rsa_keypair
from onion_registry.models import Node

from .errors import NodeConflictError, NodeValidationError, PrivateKeyIssueError
from .store import NodeStore, PrivateKeyStore

logger = logging.getLogger(__name__)

STATUS_TOKEN = "live"


def _generate_private_key_text() -> Optional[str]:
    keypair = generate_rsa_keypair()
    return export_private_key(keypair.private_key)


class NodeRegistry:
    """
    In-memory registry of overlay nodes plus a lazily filled private key cache.

    Each instance owns its own stores, so tests and apps never share state.
    Private key issuance is single-flight per node id: concurrent first
    requests for the same id wait on one generation and all get its result.

    Known gaps kept on purpose:
      - registration is unauthenticated;
      - ``0`` and ``""`` count as missing (plain truthiness check);
      - the private key issued for an id is unrelated to the public key
        that node registered.
    """

    def __init__(
        self,
        duplicate_policy: str = "allow",
        key_factory: Callable[[], Optional[str]] = _generate_private_key_text,
    ):
        if duplicate_policy not in ("allow", "reject", "upsert"):
            raise ValueError(f"unknown duplicate policy: {duplicate_policy!r}")
        self.duplicate_policy = duplicate_policy
        self.nodes = NodeStore()
        self.private_keys = PrivateKeyStore()
        self._key_factory = key_factory
        self._in_flight: Dict[str, asyncio.Task] = {}

    # --- Status ---

    def status(self) -> str:
        return STATUS_TOKEN

    # --- Nodes ---

    def register_node(self, node_id: Optional[int], pub_key: Optional[str]) -> Node:
        if not node_id or not pub_key:
            raise NodeValidationError("Node ID and public key are required for registration")

        try:
            node = Node(node_id=node_id, pub_key=pub_key)
        except pydantic.ValidationError as exc:
            raise NodeValidationError(f"Invalid node registration: {exc}") from exc

        if self.duplicate_policy != "allow":
            existing = self.nodes.index_of(node_id)
            if existing is not None:
                if self.duplicate_policy == "reject":
                    raise NodeConflictError(f"Node {node_id} already registered")
                self.nodes.replace(existing, node)
                logger.info("Node %s re-registered (upsert)", node_id)
                return node

        self.nodes.append(node)
        logger.info("Node %s registered (%d total)", node_id, len(self.nodes))
        return node

    def list_nodes(self) -> List[Node]:
        return self.nodes.snapshot()

    # --- Private keys ---

    async def get_or_create_private_key(self, node_id: Union[int, str]) -> str:
        key_id = str(node_id)

        cached = self.private_keys.get(key_id)
        if cached is not None:
            return cached

        task = self._in_flight.get(key_id)
        if task is None:
            task = asyncio.create_task(self._issue_private_key(key_id))
            self._in_flight[key_id] = task
        # one caller going away must not cancel the generation for the others
        return await asyncio.shield(task)

    async def _issue_private_key(self, key_id: str) -> str:
        try:
            private_key = await asyncio.to_thread(self._key_factory)
            if private_key is None:
                raise PrivateKeyIssueError(f"could not export private key for node {key_id}")

            self.private_keys.put(key_id, private_key)
            logger.info("Generated private key for node %s", key_id)
            return private_key
        finally:
            self._in_flight.pop(key_id, None)
