# marketplace/ticket/schemas.py
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive values for columns written in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

camel_config = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class TicketCreate(BaseModel):
    # Any body is accepted; unknown keys are dropped
    title: str | None = None
    description: str | None = None
    deadline: str | None = None
    category: str | None = None
    founder: str | None = None

    model_config = {**camel_config, "extra": "ignore"}


class UsernameIn(BaseModel):
    username: str


class TicketOut(BaseModel):
    id: int
    title: str | None = None
    description: str | None = None
    deadline: str | None = None
    category: str | None = None
    status: str | None = None
    founder: str | None = None
    applicants: list[str] = []
    assigned_to: str | None = None
    created_at: UTCDateTime | None = None

    model_config = {**camel_config, "from_attributes": True}
