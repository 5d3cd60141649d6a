import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, StrictInt
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from storefront.core.database import get_db
from storefront.core.exceptions import InternalError
from storefront.api.dependencies import get_current_user_id
from storefront.api.routes.auth import UserEnvelope
from storefront.services.account_service import account_service
from storefront.services.preference_service import preference_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["user"])


class CategorySelection(BaseModel):
    active_category_ids: list[StrictInt] = Field(alias="activeCategoryIds")

    model_config = ConfigDict(populate_by_name=True)


class StatusEnvelope(BaseModel):
    status: str = "success"


@router.get("/profile", response_model=UserEnvelope)
def get_profile(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get the profile of the token's user"""
    try:
        user = account_service.get_user(db, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching user profile")
        raise InternalError("Unable to fetch user profile")
    return {"status": "success", "data": user}


@router.post("/category", response_model=StatusEnvelope)
def update_categories(
    selection: CategorySelection,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Replace the categories the user follows with the given ids"""
    try:
        preference_service.replace_associations(db, user_id, selection.active_category_ids)
    except SQLAlchemyError:
        logger.exception("Error updating user categories")
        raise InternalError("Unable to update categories")
    return {"status": "success"}
