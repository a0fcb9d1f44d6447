import typing as tp

from pydantic import Field

from feehistory.models.mixins import Frozen
from feehistory.models.model_types import IdField, JsonRPCString


class RpcRequest(Frozen):
    """JSON-RPC 2.0 call. Params are kept as given; their wire encoding is done by the client."""

    jsonrpc: JsonRPCString = "2.0"
    id: IdField = None
    method: str
    params: list[tp.Any] = Field(default_factory=list)
