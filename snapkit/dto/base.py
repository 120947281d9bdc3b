from pydantic import BaseModel, ConfigDict


class BaseOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        use_enum_values=True,
    )
