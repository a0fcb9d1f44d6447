import typing as tp

from feehistory.models.mixins import ForbidExtra
from feehistory.models.model_types import HexString


class EthFeeHistoryResult(ForbidExtra):
    """
    Result of eth_feeHistory.

    - oldestBlock: lowest number block of the returned range.
    - baseFeePerGas: block base fees per gas, including the block after the newest one.
      Zeroes are returned for blocks created before EIP-1559.
    - gasUsedRatio: ratio of gasUsed and gasLimit per block.
    - reward: effective priority fees per gas at the requested percentiles, one list per block.
      Absent when no percentiles were requested.
    - baseFeePerBlobGas / blobGasUsedRatio: only reported by nodes with EIP-4844 enabled.
    """

    baseFeePerGas: list[HexString]
    gasUsedRatio: list[tp.Union[int, float]]
    oldestBlock: HexString
    reward: tp.Optional[list[list[HexString]]] = None
    baseFeePerBlobGas: tp.Optional[list[HexString]] = None
    blobGasUsedRatio: tp.Optional[list[tp.Union[int, float]]] = None

    @property
    def oldest_block(self) -> int:
        return int(self.oldestBlock, 16)

    @property
    def base_fees(self) -> list[int]:
        return [int(fee, 16) for fee in self.baseFeePerGas]

    @property
    def rewards(self) -> list[list[int]]:
        if self.reward is None:
            return []
        return [[int(value, 16) for value in block] for block in self.reward]

    @property
    def block_count(self) -> int:
        return len(self.gasUsedRatio)
