import math
import numbers
import typing as tp
from decimal import Decimal

import allure
from eth_utils import is_0x_prefixed, is_hex, to_int

from feehistory.apiclient import RPCClient
from feehistory.config import FeeHistoryConfig
from feehistory.exceptions import InvalidArgumentError, MissingArgumentError, OutOfRangeError
from feehistory.logger import create_logger
from feehistory.models.fee_history_model import EthFeeHistoryResult
from feehistory.models.rpc_request import RpcRequest
from feehistory.types import ApiMethod, BlockParameter, BlockReference

logger = create_logger(__name__)

MIN_BLOCK_COUNT = 1
MAX_BLOCK_COUNT = 1024
MIN_REWARD_PERCENTILE = 0
MAX_REWARD_PERCENTILE = 100

BlockCount = tp.Union[int, str]
RewardPercentiles = tp.Optional[tp.Sequence[tp.Union[int, float, Decimal]]]


def block_count_value(block_count: BlockCount) -> int:
    if isinstance(block_count, str):
        if not (is_0x_prefixed(block_count) and is_hex(block_count)) or len(block_count) == 2:
            raise InvalidArgumentError("blockCount", block_count, "an integer or a 0x-prefixed hex quantity")
        return to_int(hexstr=block_count)
    if isinstance(block_count, bool) or not isinstance(block_count, numbers.Integral):
        raise TypeError(f"blockCount must be an integer or a hex quantity string, got {type(block_count).__name__}")
    return int(block_count)


def validate_block_count_range(block_count: BlockCount) -> None:
    value = block_count_value(block_count)
    if value < MIN_BLOCK_COUNT or value > MAX_BLOCK_COUNT:
        raise OutOfRangeError("blockCount", value, MIN_BLOCK_COUNT, MAX_BLOCK_COUNT)


def validate_reward_percentiles(reward_percentiles: RewardPercentiles) -> None:
    if reward_percentiles is None:
        return
    for percentile in reward_percentiles:
        # NaN fails every comparison, so it is rejected before the range check
        if math.isnan(percentile) or not MIN_REWARD_PERCENTILE <= percentile <= MAX_REWARD_PERCENTILE:
            raise OutOfRangeError("rewardPercentiles", percentile, MIN_REWARD_PERCENTILE, MAX_REWARD_PERCENTILE)


class EthFeeHistory:
    """
    eth_feeHistory

    Returns base fee per gas and effective priority fee per gas history for the requested block range.
    The range between headBlock-4 and headBlock is guaranteed to be available, older history and
    the pending block are optional for the node to support. For pre-EIP-1559 blocks gas prices
    are returned as rewards and zeroes as base fee per gas.

    parameters:
        - blockCount: number of blocks in the range, 1 - 1024. Fewer may be returned if not all
          blocks are available. Sent as a hex quantity, or as a plain number when the builder
          is configured with block_count_as_number.
        - newestBlock: highest block of the range, by number, tag or hash.
        - rewardPercentiles: percentiles (0 - 100) of effective priority fees per gas to sample
          from each block, weighted by gas used. Nodes expect them in ascending order;
          the order is not checked here.
    """

    method = ApiMethod.ETH_FEE_HISTORY.value

    def __init__(
        self,
        client: RPCClient,
        config: tp.Optional[FeeHistoryConfig] = None,
        block_count_as_number: tp.Optional[bool] = None,
    ):
        self._client = client
        if block_count_as_number is None:
            block_count_as_number = config.block_count_as_number if config is not None else False
        self.block_count_as_number = block_count_as_number

    @staticmethod
    def validate(
        block_count: BlockCount,
        highest_block_number: tp.Optional[BlockReference],
        reward_percentiles: RewardPercentiles = None,
    ) -> None:
        validate_block_count_range(block_count)
        if highest_block_number is None:
            raise MissingArgumentError("highestBlockNumber")
        validate_reward_percentiles(reward_percentiles)

    def encode_params(
        self,
        block_count: BlockCount,
        highest_block_number: BlockReference,
        reward_percentiles: RewardPercentiles = None,
    ) -> list:
        count = block_count_value(block_count)
        return [
            count if self.block_count_as_number else hex(count),
            BlockParameter.coerce(highest_block_number),
            [] if reward_percentiles is None else [float(percentile) for percentile in reward_percentiles],
        ]

    @allure.step("Build eth_feeHistory request")
    def build_request(
        self,
        block_count: BlockCount,
        highest_block_number: tp.Optional[BlockReference],
        reward_percentiles: RewardPercentiles = None,
        request_id: tp.Union[int, str, None] = None,
    ) -> RpcRequest:
        self.validate(block_count, highest_block_number, reward_percentiles)
        request = RpcRequest(
            id=request_id,
            method=self.method,
            params=self.encode_params(block_count, highest_block_number, reward_percentiles),
        )
        logger.debug(f"Built {request.method} request: params={request.params}, id={request.id}")
        return request

    async def send_request(
        self,
        block_count: BlockCount,
        highest_block_number: tp.Optional[BlockReference],
        reward_percentiles: RewardPercentiles = None,
        request_id: tp.Union[int, str, None] = None,
    ) -> EthFeeHistoryResult:
        with allure.step("Send eth_feeHistory request"):
            request = self.build_request(block_count, highest_block_number, reward_percentiles, request_id)
            return await self._client.send_request(request, EthFeeHistoryResult)
