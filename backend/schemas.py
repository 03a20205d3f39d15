"""
Request and response shapes for items and dashboard aggregates.

Money is carried as Decimal internally and emitted as a JSON number.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
ItemType = Literal["debit", "credit"]

# Columns a client may change after creation
UPDATABLE_FIELDS = ("name", "cost", "type", "category_id")


class ItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    cost: Money = Field(ge=0, max_digits=12, decimal_places=2)
    type: ItemType
    category_id: uuid.UUID
    user_id: int


class ItemUpdate(BaseModel):
    """All-optional variant of ItemCreate; only explicitly sent fields are applied."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    cost: Optional[Money] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    type: Optional[ItemType] = None
    category_id: Optional[uuid.UUID] = None

    def changes(self) -> dict:
        return self.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)


class ItemPatch(ItemUpdate):
    """Update body that names its target row, as sent to PATCH /update/item."""

    id: uuid.UUID


class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    cost: Money
    type: ItemType
    category_id: uuid.UUID
    user_id: int
    created_at: datetime = Field(serialization_alias="createdAt")


class CategoryTotal(BaseModel):
    category: str
    expenses: Money
    income: Money


class OverallTotals(BaseModel):
    expenses: Money
    income: Money


class MonthlyTotal(BaseModel):
    month: str  # "MM"
    year: str  # "YYYY"
    expenses: Money
    income: Money


class DashboardData(BaseModel):
    categories: list[CategoryTotal]
    income_vs_expenses: OverallTotals = Field(serialization_alias="incomeVsExpenses")
    monthly: list[MonthlyTotal]
