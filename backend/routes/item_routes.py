import uuid
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from exceptions import TrackerError
from routes.errors import to_http_error
from routes.params import user_id_filter
from schemas import ItemCreate, ItemUpdate, ItemPatch, ItemRead
from services.item_service import ItemStore

router = APIRouter(prefix="/api/v1", tags=["Items"])


def _ok(data):
    return {"message": "ok", "data": data}


@router.post("/item")
def add_item(item_data: ItemCreate, db: Session = Depends(get_db)):
    try:
        item = ItemStore.create(db, item_data)
        return _ok(ItemRead.model_validate(item))
    except TrackerError as e:
        raise to_http_error(e) from e


@router.get("/items")
def list_items(user_id: Optional[int] = Depends(user_id_filter), db: Session = Depends(get_db)):
    try:
        items = ItemStore.get_all(db, user_id)
        return _ok([ItemRead.model_validate(i) for i in items])
    except TrackerError as e:
        raise to_http_error(e) from e


@router.get("/items/{item_id}")
def get_item(item_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        item = ItemStore.get_by_id(db, item_id)
        return _ok(ItemRead.model_validate(item))
    except TrackerError as e:
        raise to_http_error(e) from e


@router.patch("/items/{item_id}")
def update_item(item_id: uuid.UUID, item_data: ItemUpdate, db: Session = Depends(get_db)):
    try:
        item = ItemStore.update(db, item_id, item_data)
        return _ok(ItemRead.model_validate(item))
    except TrackerError as e:
        raise to_http_error(e) from e


@router.patch("/update/item")
def update_item_by_body(item_data: ItemPatch, db: Session = Depends(get_db)):
    # Older clients send the id inside the body
    try:
        item = ItemStore.update(db, item_data.id, item_data)
        return _ok(ItemRead.model_validate(item))
    except TrackerError as e:
        raise to_http_error(e) from e


@router.delete("/items/{item_id}")
def delete_item(item_id: uuid.UUID, db: Session = Depends(get_db)):
    try:
        deleted = ItemStore.delete(db, item_id)
        return _ok({"rows_affected": deleted})
    except TrackerError as e:
        raise to_http_error(e) from e
