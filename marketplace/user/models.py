# marketplace/user/models.py
from sqlalchemy import Column, Integer, String
from marketplace.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, index=True, nullable=False)
    # hashed by marketplace.user.security; older rows may hold plaintext
    password = Column(String, nullable=False)
    role = Column(String)
    expertise = Column(String)
