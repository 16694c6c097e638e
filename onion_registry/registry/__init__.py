from .errors import NodeConflictError, NodeValidationError, PrivateKeyIssueError, RegistryError
from .service import STATUS_TOKEN, NodeRegistry
from .store import NodeStore, PrivateKeyStore

__all__ = [
    "NodeRegistry",
    "NodeStore",
    "PrivateKeyStore",
    "STATUS_TOKEN",
    "RegistryError",
    "NodeValidationError",
    "NodeConflictError",
    "PrivateKeyIssueError",
]
