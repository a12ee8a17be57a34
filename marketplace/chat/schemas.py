# marketplace/chat/schemas.py
from pydantic import BaseModel
from marketplace.ticket.schemas import UTCDateTime, camel_config


class ChatMessageCreate(BaseModel):
    user: str | None = None
    text: str | None = None


class ChatMessageOut(BaseModel):
    id: int
    ticket_id: str
    user: str | None = None
    text: str | None = None
    time: UTCDateTime

    model_config = {**camel_config, "from_attributes": True}
