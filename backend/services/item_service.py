"""
item_service.py — Item store
CRUD over the item table. Every call is one short unit of work on the
session it is given; failures roll the session back and surface as
PersistenceError so the next request starts clean.
"""

import logging
import uuid

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import NotFoundError, PersistenceError, ValidationError
from models.category import Category
from models.item import Item
from schemas import ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)


class ItemStore:
    @staticmethod
    def _require_category(db: Session, category_id: uuid.UUID) -> None:
        try:
            found = db.get(Category, category_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error while looking up category {category_id}: {e}")
            raise PersistenceError("category lookup failed") from e
        if found is None:
            raise ValidationError(f"Unknown category: {category_id}")

    @staticmethod
    def create(db: Session, data: ItemCreate) -> Item:
        """Insert one item; id and created_at are assigned by the store."""
        ItemStore._require_category(db, data.category_id)
        item = Item(
            name=data.name,
            cost=data.cost,
            type=data.type,
            category_id=data.category_id,
            user_id=data.user_id,
        )
        try:
            db.add(item)
            db.commit()
            db.refresh(item)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error executing insert: {e}")
            raise PersistenceError("insert failed") from e
        return item

    @staticmethod
    def get_all(db: Session, user_id: int | None = None) -> list[Item]:
        """All items, or only those owned by user_id when one is given."""
        stmt = select(Item)
        if user_id is not None:
            stmt = stmt.where(Item.user_id == user_id)
        try:
            return list(db.scalars(stmt).all())
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error while getting items: {e}")
            raise PersistenceError("list failed") from e

    @staticmethod
    def get_by_id(db: Session, item_id: uuid.UUID) -> Item:
        try:
            item = db.get(Item, item_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Could not fetch item {item_id}: {e}")
            raise PersistenceError("fetch failed") from e
        if item is None:
            raise NotFoundError(f"Item {item_id} not found")
        return item

    @staticmethod
    def update(db: Session, item_id: uuid.UUID, changes: ItemUpdate) -> Item:
        """Apply the explicitly supplied fields of changes to one item."""
        fields = changes.changes()
        for key, value in fields.items():
            if value is None:
                raise ValidationError(f"Field '{key}' cannot be null")

        item = ItemStore.get_by_id(db, item_id)
        if not fields:
            return item
        if "category_id" in fields:
            ItemStore._require_category(db, fields["category_id"])

        try:
            for key, value in fields.items():
                setattr(item, key, value)
            db.commit()
            db.refresh(item)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error while updating item {item_id}: {e}")
            raise PersistenceError("update failed") from e
        return item

    @staticmethod
    def delete(db: Session, item_id: uuid.UUID) -> int:
        """Remove the item if present. Returns rows removed; 0 is not an error."""
        try:
            result = db.execute(delete(Item).where(Item.id == item_id))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error while deleting item {item_id}: {e}")
            raise PersistenceError("delete failed") from e
        return result.rowcount
