from feehistory.models.error import EthError, EthErrorDetail
from feehistory.models.fee_history_model import EthFeeHistoryResult
from feehistory.models.rpc_request import RpcRequest

__all__ = ["EthError", "EthErrorDetail", "EthFeeHistoryResult", "RpcRequest"]
