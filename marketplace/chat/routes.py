# marketplace/chat/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.chat.schemas import ChatMessageCreate, ChatMessageOut
from marketplace.chat import services as chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/{ticket_id}", response_model=list[ChatMessageOut])
def list_messages(ticket_id: str, db: Session = Depends(get_db)):
    try:
        return chat_service.get_messages(db, ticket_id)
    except SQLAlchemyError:
        logger.exception("Failed to load chat messages for ticket %s", ticket_id)
        raise HTTPException(status_code=500, detail="Failed to load chat messages")


@router.post("/{ticket_id}", response_model=ChatMessageOut)
def send_message(ticket_id: str, payload: ChatMessageCreate, db: Session = Depends(get_db)):
    try:
        return chat_service.create_message(db, ticket_id, payload)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to send message on ticket %s", ticket_id)
        raise HTTPException(status_code=500, detail="Failed to send message")
