# onion_registry/registry/store.py

from __future__ import annotations
from typing import Dict, List, Optional

from onion_registry.models import Node


class NodeStore:

    """
    Append-only list of registered nodes, kept in registration order.
    Volatile: lives as long as the owning registry.
    """
    def __init__(self):
        self._nodes: List[Node] = []

    def append(self, node: Node) -> None:
        self._nodes.append(node)

    def index_of(self, node_id: int) -> Optional[int]:
        for i, node in enumerate(self._nodes):
            if node.node_id == node_id:
                return i
        return None

    def replace(self, index: int, node: Node) -> None:
        self._nodes[index] = node

    def snapshot(self) -> List[Node]:
        return list(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


class PrivateKeyStore:

    """
    node id (as text) -> base64 PKCS#8 private key.
    Write-once, no eviction.
    """
    def __init__(self):
        self._keys: Dict[str, str] = {}

    def get(self, node_id: str) -> Optional[str]:
        return self._keys.get(node_id)

    def put(self, node_id: str, private_key: str) -> None:
        self._keys.setdefault(node_id, private_key)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._keys

    def __len__(self) -> int:
        return len(self._keys)
