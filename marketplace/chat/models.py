# marketplace/chat/models.py
from sqlalchemy import Column, DateTime, Integer, String
from marketplace.core.database import Base
from marketplace.ticket.models import utcnow


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    # plain string, not a foreign key: messages may reference any ticket id
    ticket_id = Column(String, index=True, nullable=False)
    user = Column(String)
    text = Column(String)
    time = Column(DateTime(timezone=True), default=utcnow, index=True)
