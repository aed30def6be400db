"""DB models and engine helpers for the Transaction Ingest API."""

from sqlalchemy import Column, Float, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TransactionRecord(Base):
    """A stored register transaction."""

    __tablename__ = "transactions"
    id = Column(String, primary_key=True)
    item = Column(String(500), nullable=False)
    cost = Column(Float, nullable=False)
    stored_at = Column(String, nullable=False)


def get_engine(database_url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine using the given or configured database URL."""
    if database_url is None:
        from app.core.settings import get_settings

        database_url = get_settings().database_url
    return create_engine(database_url)


def init_db(engine: Engine) -> None:
    """Create the transactions table if it does not exist."""
    Base.metadata.create_all(engine)
