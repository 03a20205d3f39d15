import os
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

# Only use connect_args if we are using SQLite
engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    # Production settings for PostgreSQL
    engine_args.update({
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    })

try:
    engine = create_engine(
        DATABASE_URL,
        **engine_args,
        echo=SQL_ECHO,
    )
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
except Exception as e:
    logger.error(f"Failed to create engine: {e}")
    raise

Base = declarative_base()


def get_db():
    """FastAPI dependency: yields a database session and closes it after use."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create the SQLite file's directory if needed, then create all tables."""
    bind = bind or engine
    db_file = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and db_file and db_file != ":memory:":
        os.makedirs(os.path.dirname(db_file) or ".", exist_ok=True)

    # Import all models so they register with Base.metadata
    from models.category import Category
    from models.item import Item

    Base.metadata.create_all(bind=bind)
    logger.info("Database initialized successfully.")
