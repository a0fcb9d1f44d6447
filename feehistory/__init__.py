from feehistory.apiclient import AsyncJsonRPCSession, RPCClient
from feehistory.config import FeeHistoryConfig
from feehistory.eth_fee_history import EthFeeHistory
from feehistory.exceptions import (
    FeeHistoryError,
    InvalidArgumentError,
    MissingArgumentError,
    OutOfRangeError,
    RPCError,
)
from feehistory.models import EthFeeHistoryResult, RpcRequest
from feehistory.types import BlockParameter, Tag

__all__ = [
    "AsyncJsonRPCSession",
    "BlockParameter",
    "EthFeeHistory",
    "EthFeeHistoryResult",
    "FeeHistoryConfig",
    "FeeHistoryError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "OutOfRangeError",
    "RPCClient",
    "RPCError",
    "RpcRequest",
    "Tag",
]
