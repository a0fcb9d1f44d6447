import typing as tp

import pytest

from feehistory.eth_fee_history import EthFeeHistory
from feehistory.models.rpc_request import RpcRequest

FEE_HISTORY_RESULT = {
    "oldestBlock": "0x60",
    "baseFeePerGas": ["0x3b9aca00", "0x3b9aca00", "0x3b9aca00", "0x3b9aca00", "0x3b9aca00", "0x3b9aca00"],
    "gasUsedRatio": [0.5, 0, 1, 0.25, 0.75],
    "reward": [
        ["0x1", "0x2", "0x3"],
        ["0x0", "0x0", "0x0"],
        ["0x5", "0x6", "0x7"],
        ["0x1", "0x1", "0x1"],
        ["0x2", "0x4", "0x8"],
    ],
}


class RecordingClient:
    def __init__(self, result: tp.Optional[dict] = None, error: tp.Optional[Exception] = None):
        self.result = FEE_HISTORY_RESULT if result is None else result
        self.error = error
        self.calls: list[tuple[RpcRequest, type]] = []

    async def send_request(self, request, result_model):
        self.calls.append((request, result_model))
        if self.error is not None:
            raise self.error
        return result_model.model_validate(self.result)


@pytest.fixture
def fee_history_result() -> dict:
    return FEE_HISTORY_RESULT


@pytest.fixture
def rpc_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def fee_history(rpc_client: RecordingClient) -> EthFeeHistory:
    return EthFeeHistory(rpc_client)


@pytest.fixture
def fee_history_number_mode(rpc_client: RecordingClient) -> EthFeeHistory:
    return EthFeeHistory(rpc_client, block_count_as_number=True)
