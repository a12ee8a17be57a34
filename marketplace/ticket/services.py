# marketplace/ticket/services.py
import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from marketplace.core.errors import AlreadyAssignedError, InvalidTransitionError, TicketNotFoundError
from marketplace.ticket.models import Ticket, TicketApplicant, TicketStatus
from marketplace.ticket.schemas import TicketCreate

logger = logging.getLogger(__name__)

GENERAL_CATEGORY = "General"

ALLOWED_TRANSITIONS: dict[TicketStatus, set[TicketStatus]] = {
    TicketStatus.OPEN: {TicketStatus.ASSIGNED, TicketStatus.COMPLETED},
    TicketStatus.ASSIGNED: {TicketStatus.COMPLETED},
    TicketStatus.COMPLETED: {TicketStatus.COMPLETED},
}


def current_status(ticket: Ticket) -> TicketStatus:
    # rows written before statuses existed count as open
    try:
        return TicketStatus(ticket.status)
    except ValueError:
        return TicketStatus.OPEN


def can_transition(current: TicketStatus, target: TicketStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def check_transition(current: TicketStatus, target: TicketStatus) -> None:
    if not can_transition(current, target):
        raise InvalidTransitionError(current.value, target.value)


def get_all_tickets(
    db: Session,
    role: str | None = None,
    username: str | None = None,
    expertise: str | None = None,
) -> list[Ticket]:
    query = db.query(Ticket)
    if role == "founder" and username:
        query = query.filter(Ticket.founder == username)
    elif role == "professional" and expertise:
        query = query.filter(or_(Ticket.category == expertise, Ticket.category == GENERAL_CATEGORY))
    return query.order_by(Ticket.id).all()


def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def require_ticket(db: Session, ticket_id: int) -> Ticket:
    ticket = get_ticket(db, ticket_id)
    if not ticket:
        raise TicketNotFoundError(ticket_id)
    return ticket


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    db_ticket = Ticket(**payload.model_dump(), status=TicketStatus.OPEN.value)
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s created by %s", db_ticket.id, db_ticket.founder)
    return db_ticket


def add_interest(db: Session, ticket_id: int, username: str) -> Ticket:
    db_ticket = require_ticket(db, ticket_id)
    if username in db_ticket.applicants:
        return db_ticket

    db.add(TicketApplicant(ticket_id=db_ticket.id, username=username))
    try:
        db.commit()
    except IntegrityError:
        # the same username landed first through a concurrent request
        db.rollback()
    else:
        logger.info("%s is interested in ticket %s", username, ticket_id)
    db.refresh(db_ticket)
    return db_ticket


def assign_ticket(db: Session, ticket_id: int, username: str) -> Ticket:
    """Set the assignee once.

    The check and the write are a single conditional UPDATE, so of two
    concurrent requests exactly one matches the row.
    """
    blocked = [s.value for s in TicketStatus if not can_transition(s, TicketStatus.ASSIGNED)]
    matched = (
        db.query(Ticket)
        .filter(
            Ticket.id == ticket_id,
            Ticket.assigned_to.is_(None),
            or_(Ticket.status.is_(None), Ticket.status.notin_(blocked)),
        )
        .update(
            {Ticket.assigned_to: username, Ticket.status: TicketStatus.ASSIGNED.value},
            synchronize_session=False,
        )
    )
    db.commit()

    db_ticket = require_ticket(db, ticket_id)
    if not matched:
        if db_ticket.assigned_to is not None:
            raise AlreadyAssignedError(ticket_id)
        raise InvalidTransitionError(current_status(db_ticket).value, TicketStatus.ASSIGNED.value)
    logger.info("Ticket %s assigned to %s", ticket_id, username)
    return db_ticket


def complete_ticket(db: Session, ticket_id: int) -> Ticket:
    db_ticket = require_ticket(db, ticket_id)
    check_transition(current_status(db_ticket), TicketStatus.COMPLETED)
    db_ticket.status = TicketStatus.COMPLETED.value
    db.commit()
    db.refresh(db_ticket)
    logger.info("Ticket %s completed", ticket_id)
    return db_ticket


def get_assigned_tickets(db: Session, role: str | None, username: str | None) -> list[Ticket]:
    if not username:
        return []
    query = db.query(Ticket)
    if role == "founder":
        query = query.filter(Ticket.founder == username, Ticket.assigned_to.isnot(None))
    else:
        query = query.filter(Ticket.assigned_to == username)
    return query.order_by(Ticket.id).all()
