"""Request store: append-only anonymous menu suggestions."""

from datetime import date

from sqlalchemy.orm import Session

from app.models import MenuRequest


def create_menu_request(db: Session, request_date: date, requested_menu: str) -> int:
    menu_request = MenuRequest(request_date=request_date, requested_menu=requested_menu)
    db.add(menu_request)
    db.commit()
    return menu_request.id


def list_menu_requests(db: Session) -> list[MenuRequest]:
    """All suggestions, newest request_date first."""
    return db.query(MenuRequest).order_by(MenuRequest.request_date.desc(), MenuRequest.id.desc()).all()
