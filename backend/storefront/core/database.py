from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from storefront.core.config import settings

# SQLite connections are shared across the threadpool FastAPI runs sync work in
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Create database engine - manages connection pool
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

# Each request gets a new session
# autocommit=False: writes need an explicit commit, so a failed request leaves nothing behind
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all database models
Base = declarative_base()


def get_db():
    """
    Dependency for getting database session.

    The session is closed after the request completes, even when the
    handler raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create tables for every model registered on Base"""
    # Importing the models package registers them with Base.metadata
    import storefront.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
