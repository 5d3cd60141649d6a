import logging
from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from storefront.core.database import get_db
from storefront.core.exceptions import InternalError
from storefront.api.dependencies import get_current_user_id
from storefront.services.preference_service import preference_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/category", tags=["category"])


class CategoryResponse(BaseModel):
    id: int
    name: str
    is_associated: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryListEnvelope(BaseModel):
    status: str = "success"
    data: List[CategoryResponse]


@router.get("", response_model=CategoryListEnvelope)
def list_categories(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List all categories, flagging the ones the user follows"""
    try:
        rows = preference_service.list_categories_for_user(db, user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching categories")
        raise InternalError("Unable to fetch categories")

    data = [
        CategoryResponse(id=category.id, name=category.name, is_associated=associated)
        for category, associated in rows
    ]
    return {"status": "success", "data": data}
