import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from onion_registry.crypto import CryptoError
from onion_registry.models import (
    GetNodeRegistryBody,
    PrivateKeyResponse,
    RegisterNodeBody,
    RegisterNodeResponse,
)
from onion_registry.registry import (
    NodeConflictError,
    NodeRegistry,
    NodeValidationError,
    PrivateKeyIssueError,
)

logger = logging.getLogger(__name__)

REGISTRATION_ERROR = "Node ID and public key are required for registration"
INTERNAL_ERROR = "Internal Server Error"

router = APIRouter()
private_key_router = APIRouter()


def get_registry(request: Request) -> NodeRegistry:
    """Registry owned by the running app instance"""
    return request.app.state.registry


@router.get("/status", response_class=PlainTextResponse)
async def get_status(registry: NodeRegistry = Depends(get_registry)):
    return registry.status()


@router.get("/getNodeRegistry")
async def get_node_registry(registry: NodeRegistry = Depends(get_registry)):
    body = GetNodeRegistryBody(nodes=registry.list_nodes())
    return body.model_dump(by_alias=True)


@router.post(
    "/registerNode",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterNodeResponse,
)
async def register_node(
    body: RegisterNodeBody,
    registry: NodeRegistry = Depends(get_registry),
):
    """Register a node's public key. No authentication, no format check on the key."""
    try:
        registry.register_node(body.node_id, body.pub_key)
    except NodeValidationError:
        logger.warning("Rejected registration with missing fields: nodeId=%r", body.node_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REGISTRATION_ERROR)
    except NodeConflictError:
        logger.warning("Rejected duplicate registration for node %s", body.node_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Node already registered")

    return RegisterNodeResponse(message="Node registered successfully")


@private_key_router.get("/getPrivateKey/{node_id}", response_model=PrivateKeyResponse)
async def get_private_key(node_id: str, registry: NodeRegistry = Depends(get_registry)):
    """
    Return the private key issued for ``node_id``, generating it on first use.

    Anyone who can reach the registry can read any node's key; disable with
    REGISTRY_EXPOSE_PRIVATE_KEYS=false.
    """
    try:
        private_key = await registry.get_or_create_private_key(node_id)
    except (CryptoError, PrivateKeyIssueError):
        logger.exception("Failed to issue private key for node %s", node_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)

    return PrivateKeyResponse(result=private_key)
