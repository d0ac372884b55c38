"""Menu request endpoints: an open suggestion box for future menus."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.meal import CreatedResponse
from app.schemas.menu_request import MenuRequestCreate, MenuRequestResponse
from app.services.menu_requests import create_menu_request, list_menu_requests

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def post_menu_request(
    body: MenuRequestCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    request_id = create_menu_request(db, body.request_date, body.requested_menu)
    return CreatedResponse(message="Menu request added successfully", id=request_id)


@router.get("", response_model=list[MenuRequestResponse])
def get_menu_requests(db: Annotated[Session, Depends(get_db)]) -> list[MenuRequestResponse]:
    """All suggestions, newest request date first."""
    return [MenuRequestResponse.model_validate(r) for r in list_menu_requests(db)]
