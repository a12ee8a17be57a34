# marketplace/user/schemas.py
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    role: str | None = None
    expertise: str | None = None


class UserOut(BaseModel):
    id: int
    username: str
    role: str | None = None
    expertise: str | None = None

    model_config = {"from_attributes": True}
