# marketplace/chat/services.py
from sqlalchemy.orm import Session
from marketplace.chat.models import ChatMessage
from marketplace.chat.schemas import ChatMessageCreate


def get_messages(db: Session, ticket_id: str) -> list[ChatMessage]:
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.ticket_id == ticket_id)
        .order_by(ChatMessage.time.asc(), ChatMessage.id.asc())
        .all()
    )


def create_message(db: Session, ticket_id: str, payload: ChatMessageCreate) -> ChatMessage:
    db_message = ChatMessage(ticket_id=ticket_id, **payload.model_dump())
    db.add(db_message)
    db.commit()
    db.refresh(db_message)
    return db_message
