import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from storefront.core.database import get_db
from storefront.core.exceptions import InternalError
from storefront.services.account_service import account_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Serialized as createdAt / updatedAt
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class UserEnvelope(BaseModel):
    status: str = "success"
    data: UserResponse


class TokenEnvelope(BaseModel):
    status: str = "success"
    token: str


@router.post("/user/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    try:
        user = account_service.register(db, user_data.name, user_data.email, user_data.password)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error registering user")
        raise InternalError("Unable to register user")
    return {"status": "success", "data": user}


@router.post("/login", response_model=TokenEnvelope)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a token"""
    try:
        token = account_service.login(db, credentials.email, credentials.password)
    except SQLAlchemyError:
        logger.exception("Error logging in")
        raise InternalError("Unable to log in")
    return {"status": "success", "token": token}
