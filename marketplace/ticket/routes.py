# marketplace/ticket/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.core.errors import AlreadyAssignedError, InvalidTransitionError, TicketNotFoundError
from marketplace.ticket.schemas import TicketCreate, TicketOut, UsernameIn
from marketplace.ticket import services as ticket_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["Tickets"])
assigned_router = APIRouter(prefix="/assigned", tags=["Tickets"])


@router.get("", response_model=list[TicketOut], response_model_exclude_none=True)
def list_all(
    role: str | None = Query(default=None, description="founder or professional"),
    username: str | None = Query(default=None),
    expertise: str | None = Query(default=None, description="Category a professional works in"),
    db: Session = Depends(get_db),
):
    return ticket_service.get_all_tickets(db, role=role, username=username, expertise=expertise)


@router.post("", response_model=TicketOut, response_model_exclude_none=True, status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)


@router.get("/{ticket_id}", response_model=TicketOut, response_model_exclude_none=True)
def get(ticket_id: str, db: Session = Depends(get_db)):
    # malformed ids are treated like a failed lookup
    try:
        ticket = ticket_service.get_ticket(db, int(ticket_id))
    except (ValueError, SQLAlchemyError):
        logger.exception("Failed to fetch ticket %s", ticket_id)
        raise HTTPException(status_code=500, detail="Failed to fetch ticket")
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


@router.post("/{ticket_id}/interest", response_model=TicketOut, response_model_exclude_none=True)
def interest(ticket_id: int, payload: UsernameIn, db: Session = Depends(get_db)):
    try:
        return ticket_service.add_interest(db, ticket_id, payload.username)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.post("/{ticket_id}/assign", response_model=TicketOut, response_model_exclude_none=True)
def assign(ticket_id: int, payload: UsernameIn, db: Session = Depends(get_db)):
    try:
        return ticket_service.assign_ticket(db, ticket_id, payload.username)
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except (AlreadyAssignedError, InvalidTransitionError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/{ticket_id}/complete", response_model=TicketOut, response_model_exclude_none=True)
def complete(ticket_id: str, db: Session = Depends(get_db)):
    try:
        return ticket_service.complete_ticket(db, int(ticket_id))
    except TicketNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except (ValueError, SQLAlchemyError):
        logger.exception("Failed to complete ticket %s", ticket_id)
        raise HTTPException(status_code=500, detail="Failed to mark ticket as completed")


@assigned_router.get("", response_model=list[TicketOut], response_model_exclude_none=True)
def list_assigned(
    role: str | None = Query(default=None),
    username: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return ticket_service.get_assigned_tickets(db, role=role, username=username)
