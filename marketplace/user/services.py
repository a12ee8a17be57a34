# marketplace/user/services.py
import logging

from sqlalchemy.orm import Session
from marketplace.core.errors import UsernameTakenError
from marketplace.user.models import User
from marketplace.user.schemas import UserCreate
from marketplace.user.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_users_by_username(db: Session, username: str) -> list[User]:
    return db.query(User).filter(User.username == username).order_by(User.id).all()


def authenticate(db: Session, username: str | None, password: str | None) -> User | None:
    if not username or not password:
        return None
    # usernames are not unique; any row with a matching password is a match
    for user in get_users_by_username(db, username):
        if verify_password(password, user.password):
            return user
    logger.warning("Failed login for %r", username)
    return None


def create_user(db: Session, payload: UserCreate) -> User:
    """Register a user, first writer wins.

    The row is written before the name check, so of two concurrent
    registrations only the one with the lower id survives.
    """
    if get_users_by_username(db, payload.username):
        raise UsernameTakenError(payload.username)
    data = payload.model_dump()
    data["password"] = hash_password(payload.password)
    db_user = User(**data)
    db.add(db_user)
    db.commit()

    first = get_users_by_username(db, payload.username)[0]
    if first.id != db_user.id:
        db.delete(db_user)
        db.commit()
        raise UsernameTakenError(payload.username)

    db.refresh(db_user)
    logger.info("Registered %s as %s", db_user.username, db_user.role)
    return db_user
