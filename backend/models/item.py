import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Uuid, CheckConstraint
from sqlalchemy.orm import relationship
from database import Base

ITEM_TYPES = ("debit", "credit")


class Item(Base):
    __tablename__ = "item"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    type = Column(String(10), nullable=False)  # debit/credit
    category_id = Column(Uuid, ForeignKey("category.id"), nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    category = relationship("Category", back_populates="items")

    __table_args__ = (
        CheckConstraint("type IN ('debit', 'credit')", name="ck_item_type"),
        CheckConstraint("cost >= 0", name="ck_item_cost_non_negative"),
    )
