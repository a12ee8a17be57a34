# marketplace/core/errors.py
# Raised by the service layer; routes turn them into HTTP responses.


class MarketplaceError(Exception):
    """Base exception for marketplace operations."""
    pass


class TicketNotFoundError(MarketplaceError):
    """Raised when a ticket id has no matching row."""

    def __init__(self, ticket_id):
        super().__init__("Ticket not found")
        self.ticket_id = ticket_id


class AlreadyAssignedError(MarketplaceError):
    """Raised when a ticket already has an assignee."""

    def __init__(self, ticket_id):
        super().__init__("Already assigned")
        self.ticket_id = ticket_id


class InvalidTransitionError(MarketplaceError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current, target):
        super().__init__(f"Cannot move ticket from {current} to {target}")
        self.current = current
        self.target = target


class UsernameTakenError(MarketplaceError):
    """Raised when registering a username that already exists."""

    def __init__(self, username):
        super().__init__("Username already exists")
        self.username = username
