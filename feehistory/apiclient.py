import itertools
import typing as tp

import allure
import httpx
from pydantic import BaseModel

from feehistory.config import DEFAULT_RPC_TIMEOUT, FeeHistoryConfig
from feehistory.exceptions import RPCError
from feehistory.logger import create_logger
from feehistory.models.error import EthErrorDetail
from feehistory.models.rpc_request import RpcRequest
from feehistory.types import BlockParameter

logger = create_logger(__name__)

ResultT = tp.TypeVar("ResultT", bound=BaseModel)


class RPCClient(tp.Protocol):
    async def send_request(self, request: RpcRequest, result_model: type[ResultT]) -> ResultT:
        ...


def encode_param(param: tp.Any) -> tp.Any:
    if isinstance(param, BlockParameter):
        return param.to_rpc()
    if isinstance(param, (list, tuple)):
        return [encode_param(item) for item in param]
    return param


def request_payload(request: RpcRequest, req_id: tp.Union[int, str, None] = None) -> dict:
    return {
        "jsonrpc": request.jsonrpc,
        "id": request.id if request.id is not None else req_id,
        "method": request.method,
        "params": [encode_param(param) for param in request.params],
    }


class AsyncJsonRPCSession(httpx.AsyncClient):
    def __init__(self, url: str, timeout: float = DEFAULT_RPC_TIMEOUT, **kwargs):
        super().__init__(timeout=timeout, **kwargs)
        self.url = url
        self._ids = itertools.count(1)

    @classmethod
    def from_config(cls, config: FeeHistoryConfig, **kwargs) -> "AsyncJsonRPCSession":
        if config.rpc_url is None:
            raise ValueError("rpc_url is not configured")
        return cls(config.rpc_url, timeout=config.timeout, **kwargs)

    def next_id(self) -> int:
        return next(self._ids)

    async def send_rpc(
        self,
        method: str,
        params: tp.Optional[list] = None,
        req_id: tp.Union[int, str, None] = None,
    ) -> dict:
        body = {
            "jsonrpc": "2.0",
            "id": self.next_id() if req_id is None else req_id,
            "method": method,
            "params": params or [],
        }
        return await self._post(body)

    async def send_request(self, request: RpcRequest, result_model: type[ResultT]) -> ResultT:
        with allure.step(f"Send {request.method}"):
            payload = request_payload(request, req_id=self.next_id())
            response = await self._post(payload)

        if "error" in response:
            detail = EthErrorDetail(**response["error"])
            logger.warning(f"{request.method} (id={payload['id']}) returned error {detail.code}: {detail.message}")
            raise RPCError(detail, method=request.method)
        return result_model.model_validate(response.get("result"))

    async def _post(self, body: dict) -> dict:
        logger.debug(f"-> {body['method']} id={body['id']} params={body['params']}")
        resp = await self.post(self.url, json=body)
        resp.raise_for_status()
        return resp.json()
