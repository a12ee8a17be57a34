# marketplace/ticket/models.py
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class TicketStatus(str, enum.Enum):
    OPEN = "Open"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String)
    description = Column(String)
    deadline = Column(String)
    category = Column(String, index=True)
    status = Column(String, default=TicketStatus.OPEN.value, index=True)
    founder = Column(String, index=True)
    assigned_to = Column(String, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    applicant_rows = relationship(
        "TicketApplicant",
        order_by="TicketApplicant.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def applicants(self) -> list[str]:
        return [row.username for row in self.applicant_rows]


class TicketApplicant(Base):
    """One row per (ticket, username); the row id keeps insertion order."""

    __tablename__ = "ticket_applicants"
    __table_args__ = (UniqueConstraint("ticket_id", "username", name="uq_ticket_applicant"),)

    id = Column(Integer, primary_key=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id", ondelete="CASCADE"), nullable=False, index=True)
    username = Column(String, nullable=False)
