import enum
import typing as tp
from dataclasses import dataclass

from eth_utils import is_0x_prefixed, is_hex, to_int


class ApiMethod(str, enum.Enum):
    ETH_FEE_HISTORY = "eth_feeHistory"


class Tag(str, enum.Enum):
    EARLIEST = "earliest"
    LATEST = "latest"
    PENDING = "pending"
    SAFE = "safe"
    FINALIZED = "finalized"


TAG_VALUES = frozenset(tag.value for tag in Tag)
BLOCK_HASH_LENGTH = 66  # "0x" + 32 bytes


@dataclass(frozen=True)
class BlockParameter:
    """Reference to a block by number, tag or hash. Exactly one of the fields is set."""

    number: tp.Optional[int] = None
    tag: tp.Optional[Tag] = None
    block_hash: tp.Optional[str] = None

    def __post_init__(self):
        given = [value for value in (self.number, self.tag, self.block_hash) if value is not None]
        if len(given) != 1:
            raise ValueError("Exactly one of number, tag or block_hash must be set")
        if self.number is not None and self.number < 0:
            raise ValueError(f"Block number must be non-negative, current value: {self.number}")

    @classmethod
    def from_number(cls, number: int) -> "BlockParameter":
        return cls(number=number)

    @classmethod
    def from_tag(cls, tag: tp.Union[Tag, str]) -> "BlockParameter":
        return cls(tag=Tag(tag))

    @classmethod
    def from_hash(cls, block_hash: str) -> "BlockParameter":
        return cls(block_hash=block_hash)

    @classmethod
    def latest(cls) -> "BlockParameter":
        return cls(tag=Tag.LATEST)

    @classmethod
    def pending(cls) -> "BlockParameter":
        return cls(tag=Tag.PENDING)

    @classmethod
    def earliest(cls) -> "BlockParameter":
        return cls(tag=Tag.EARLIEST)

    @classmethod
    def coerce(cls, value: "BlockReference") -> "BlockParameter":
        if isinstance(value, BlockParameter):
            return value
        if isinstance(value, Tag):
            return cls(tag=value)
        if isinstance(value, bool):
            raise TypeError(f"Unsupported block reference: {value!r}")
        if isinstance(value, int):
            return cls(number=value)
        if isinstance(value, str):
            if value in TAG_VALUES:
                return cls(tag=Tag(value))
            if is_0x_prefixed(value) and is_hex(value):
                if len(value) == BLOCK_HASH_LENGTH:
                    return cls(block_hash=value.lower())
                return cls(number=to_int(hexstr=value))
            raise ValueError(f"Unsupported block reference: {value!r}")
        raise TypeError(f"Unsupported block reference: {value!r}")

    def to_rpc(self) -> tp.Union[str, dict[str, str]]:
        if self.number is not None:
            return hex(self.number)
        if self.tag is not None:
            return self.tag.value
        # EIP-1898
        return {"blockHash": self.block_hash}

    def __str__(self) -> str:
        if self.number is not None:
            return str(self.number)
        if self.tag is not None:
            return self.tag.value
        return self.block_hash


BlockReference = tp.Union[BlockParameter, Tag, int, str]
