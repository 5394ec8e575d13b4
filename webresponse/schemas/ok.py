from pydantic import BaseModel, ConfigDict


class OKResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
