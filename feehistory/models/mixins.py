from pydantic import BaseModel, ConfigDict


class ForbidExtra(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Frozen(ForbidExtra):
    model_config = ConfigDict(extra="forbid", frozen=True)
