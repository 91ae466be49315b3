from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from .config import settings
from .models.generated import Base

# check_same_thread=False is required for SQLite across FastAPI worker threads
engine = create_engine(
    settings.resolved_database_url,
    connect_args={"check_same_thread": False}
)


@event.listens_for(Engine, "connect")
def enable_sqlite_fk(dbapi_connection, _):
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind: Engine = engine) -> None:
    """Create all tables that don't exist yet."""
    Base.metadata.create_all(bind=bind)


# FastAPI dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
