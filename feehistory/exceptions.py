import typing as tp

from feehistory.models.error import EthErrorDetail


class FeeHistoryError(Exception):
    pass


class OutOfRangeError(FeeHistoryError, ValueError):
    def __init__(self, argument: str, value: tp.Any, lower: tp.Any, upper: tp.Any):
        self.argument = argument
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{argument} need to be in a range of {lower} - {upper}, current value: {value}")


class MissingArgumentError(FeeHistoryError, ValueError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} is required")


class InvalidArgumentError(FeeHistoryError, ValueError):
    def __init__(self, argument: str, value: tp.Any, expected: str):
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} must be {expected}, current value: {value!r}")


class RPCError(FeeHistoryError):
    """Error member of a JSON-RPC response returned by the node."""

    def __init__(self, detail: EthErrorDetail, method: tp.Optional[str] = None):
        self.detail = detail
        self.method = method
        super().__init__(f"{method or 'RPC call'} failed with code {detail.code}: {detail.message}")

    @property
    def code(self) -> int:
        return self.detail.code
