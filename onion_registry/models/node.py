from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Node(BaseModel):
    """A registered overlay node: its id and the public key it announced."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    node_id: int = Field(alias="nodeId")
    pub_key: str = Field(alias="pubKey")


class RegisterNodeBody(BaseModel):
    # Both optional so that absent fields reach the falsy check instead of a 422.
    # StrictInt: JSON `true` or "5" is not a node id.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    node_id: Optional[StrictInt] = Field(default=None, alias="nodeId")
    pub_key: Optional[str] = Field(default=None, alias="pubKey")


class GetNodeRegistryBody(BaseModel):
    nodes: List[Node]


class RegisterNodeResponse(BaseModel):
    message: str


class PrivateKeyResponse(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    error: str
