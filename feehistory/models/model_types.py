import typing as tp

from pydantic import StringConstraints

HexString = tp.Annotated[str, StringConstraints(pattern=r"^0x[0-9a-fA-F]*$")]
JsonRPCString = tp.Literal["2.0"]
IdField = tp.Union[int, str, None]
