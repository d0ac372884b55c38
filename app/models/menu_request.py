"""ORM model for anonymous menu suggestions."""

from sqlalchemy import Column, Date, Integer, Text

from app.models.base import Base


class MenuRequest(Base):
    __tablename__ = "menu_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    request_date = Column(Date, nullable=False, index=True)
    requested_menu = Column(Text, nullable=False)
