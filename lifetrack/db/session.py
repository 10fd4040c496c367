from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from lifetrack.core.config import settings


def _engine_options() -> dict:
    if settings.uses_sqlite:
        options = {"connect_args": {"check_same_thread": False}, "echo": False}
        # In-memory databases live inside a single connection
        if settings.SQLALCHEMY_DATABASE_URI in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    # PostgreSQL configuration with connection pooling
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 300,     # Recycle connections every 5 minutes
        "pool_pre_ping": True,   # Validate connections before use
        "pool_timeout": 30,
        "echo": False,           # Set to True for SQL logging
    }


engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_options())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
