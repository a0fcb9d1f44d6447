import os
import typing as tp

from pydantic import PositiveFloat

from feehistory.models.mixins import Frozen

BLOCK_COUNT_AS_NUMBER_ENV = "FEE_HISTORY_BLOCK_COUNT_AS_NUMBER"
RPC_URL_ENV = "FEE_HISTORY_RPC_URL"
RPC_TIMEOUT_ENV = "FEE_HISTORY_RPC_TIMEOUT"

DEFAULT_RPC_TIMEOUT = 30


class FeeHistoryConfig(Frozen):
    # Some nodes reject blockCount as a hex quantity and expect a plain number
    block_count_as_number: bool = False
    rpc_url: tp.Optional[str] = None
    timeout: PositiveFloat = DEFAULT_RPC_TIMEOUT

    @classmethod
    def from_env(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "FeeHistoryConfig":
        environ = os.environ if environ is None else environ
        values = {}
        if BLOCK_COUNT_AS_NUMBER_ENV in environ:
            values["block_count_as_number"] = environ[BLOCK_COUNT_AS_NUMBER_ENV]
        if RPC_URL_ENV in environ:
            values["rpc_url"] = environ[RPC_URL_ENV]
        if RPC_TIMEOUT_ENV in environ:
            values["timeout"] = environ[RPC_TIMEOUT_ENV]
        return cls(**values)
