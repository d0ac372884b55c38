"""ORM model for the published meal of one calendar day."""

from sqlalchemy import Column, Date, Integer, String, Text

from app.models.base import Base


class Meal(Base):
    """
    One row per date. image_url is an opaque reference produced by the upload endpoint.
    """

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, unique=True, index=True)
    menu = Column(Text, nullable=False)
    image_url = Column(String(2048), nullable=True)
