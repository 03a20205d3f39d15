import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship
from database import Base


class Category(Base):
    __tablename__ = "category"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)

    items = relationship("Item", back_populates="category")
