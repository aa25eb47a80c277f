from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ClientEntity(BaseModel):
    """Stored shape of a Client record inside the persisted client list."""

    id: int
    full_name: str
    age: int | None = None
    gender: str = ""
    email: str
    phone: str
    goal: str
    start_date: str
    end_date: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("age", mode="before")
    @classmethod
    def coerce_legacy_age(cls, v):
        """Older records keep the age exactly as typed, including the empty string."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, str):
            return int(v.strip())
        return v

    @field_validator("gender", "end_date", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

