# marketplace/user/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from marketplace.core.database import get_db
from marketplace.core.errors import UsernameTakenError
from marketplace.user.schemas import LoginRequest, UserCreate, UserOut
from marketplace.user import services as user_service

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return user


@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        return user_service.create_user(db, payload)
    except UsernameTakenError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
