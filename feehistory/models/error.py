import typing as tp

from pydantic import field_validator

from feehistory.models.mixins import ForbidExtra
from feehistory.models.model_types import IdField, JsonRPCString


class EthErrorDetail(ForbidExtra):
    code: int
    message: str
    data: tp.Optional[tp.Any] = None

    @field_validator("message")
    def check_message(cls, value):
        if len(value) == 0:
            raise ValueError("message must be non-empty")
        return value


class EthError(ForbidExtra):
    jsonrpc: JsonRPCString
    id: IdField
    error: EthErrorDetail
