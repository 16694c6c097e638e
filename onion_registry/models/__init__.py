from .node import (
    ErrorResponse,
    GetNodeRegistryBody,
    Node,
    PrivateKeyResponse,
    RegisterNodeBody,
    RegisterNodeResponse,
)

__all__ = [
    "Node",
    "RegisterNodeBody",
    "GetNodeRegistryBody",
    "RegisterNodeResponse",
    "PrivateKeyResponse",
    "ErrorResponse",
]
