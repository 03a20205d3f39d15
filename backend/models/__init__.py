# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from models.category import Category
from models.item import Item

__all__ = [
    "Category",
    "Item",
]
