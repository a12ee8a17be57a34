# tests/test_ticket_services.py
import pytest
from sqlalchemy.exc import IntegrityError

from marketplace.core.database import SessionLocal
from marketplace.core.errors import AlreadyAssignedError, InvalidTransitionError, TicketNotFoundError
from marketplace.ticket import services as ticket_service
from marketplace.ticket.models import Ticket, TicketApplicant, TicketStatus
from marketplace.ticket.schemas import TicketCreate


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def test_transitions():
    assert ticket_service.can_transition(TicketStatus.OPEN, TicketStatus.ASSIGNED)
    assert ticket_service.can_transition(TicketStatus.OPEN, TicketStatus.COMPLETED)
    assert ticket_service.can_transition(TicketStatus.ASSIGNED, TicketStatus.COMPLETED)
    assert not ticket_service.can_transition(TicketStatus.ASSIGNED, TicketStatus.ASSIGNED)
    assert not ticket_service.can_transition(TicketStatus.COMPLETED, TicketStatus.ASSIGNED)
    assert not ticket_service.can_transition(TicketStatus.COMPLETED, TicketStatus.OPEN)

    with pytest.raises(InvalidTransitionError):
        ticket_service.check_transition(TicketStatus.COMPLETED, TicketStatus.ASSIGNED)


def test_legacy_ticket_without_status_counts_as_open(db):
    legacy = Ticket(title="old")
    db.add(legacy)
    db.commit()
    db.query(Ticket).filter(Ticket.id == legacy.id).update({Ticket.status: None})
    db.commit()
    db.refresh(legacy)

    assert ticket_service.current_status(legacy) is TicketStatus.OPEN
    assigned = ticket_service.assign_ticket(db, legacy.id, "pro1")
    assert assigned.status == "Assigned"


def test_assign_is_first_wins(db):
    ticket = ticket_service.create_ticket(db, TicketCreate(title="T"))
    ticket_service.assign_ticket(db, ticket.id, "pro1")

    with pytest.raises(AlreadyAssignedError):
        ticket_service.assign_ticket(db, ticket.id, "pro2")
    assert ticket_service.get_ticket(db, ticket.id).assigned_to == "pro1"


def test_missing_ticket_raises(db):
    with pytest.raises(TicketNotFoundError):
        ticket_service.add_interest(db, 999, "pro1")
    with pytest.raises(TicketNotFoundError):
        ticket_service.assign_ticket(db, 999, "pro1")
    with pytest.raises(TicketNotFoundError):
        ticket_service.complete_ticket(db, 999)


def test_store_rejects_duplicate_applicant(db):
    ticket = ticket_service.create_ticket(db, TicketCreate(title="T"))
    ticket_service.add_interest(db, ticket.id, "pro1")

    db.add(TicketApplicant(ticket_id=ticket.id, username="pro1"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert ticket_service.get_ticket(db, ticket.id).applicants == ["pro1"]


def test_assign_from_two_sessions_first_wins():
    with SessionLocal() as setup:
        ticket_id = ticket_service.create_ticket(setup, TicketCreate(title="T")).id

    first = SessionLocal()
    second = SessionLocal()
    try:
        # both sessions have seen the ticket unassigned
        assert ticket_service.get_ticket(first, ticket_id).assigned_to is None
        assert ticket_service.get_ticket(second, ticket_id).assigned_to is None

        ticket_service.assign_ticket(first, ticket_id, "p1")
        with pytest.raises(AlreadyAssignedError):
            ticket_service.assign_ticket(second, ticket_id, "p2")
    finally:
        first.close()
        second.close()

    with SessionLocal() as check:
        stored = ticket_service.get_ticket(check, ticket_id)
        assert stored.assigned_to == "p1"
        assert stored.status == "Assigned"
