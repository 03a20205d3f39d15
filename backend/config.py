import os
from dotenv import load_dotenv

load_dotenv()

# --- Environment ---
APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# --- Database ---
def build_database_url() -> str:
    """DATABASE_URL wins; otherwise assemble a PostgreSQL DSN from DB_* or fall back to SQLite."""
    url = os.getenv("DATABASE_URL", "")
    db_host = os.getenv("DB_HOST", "")
    if not url and db_host:
        user = os.getenv("DB_USER", "")
        password = os.getenv("DB_PASSWORD", "")
        name = os.getenv("DB_NAME", "")
        url = f"postgresql://{user}:{password}@{db_host}/{name}"
        if os.getenv("APP_ENV", "development") != "production":
            url += "?sslmode=disable"
    if not url:
        url = "sqlite:///./data/tracker.db"

    # Fix for common SQLAlchemy issues with postgres:// vs postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


DATABASE_URL = build_database_url()

# Echo every SQL statement to the log (query debugging)
SQL_ECHO = os.getenv("SQL_ECHO", "").strip().lower() in ("1", "true", "yes", "on")

# --- HTTP ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
