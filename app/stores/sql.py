"""SQLAlchemy-backed transaction store."""

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.db import TransactionRecord, get_engine, init_db
from app.core.errors import StorageFailure
from app.core.models import StoredTransaction, Transaction
from app.core.settings import Settings
from app.core.utils import get_logger
from app.stores.base import TransactionStore

logger = get_logger("transaction-ingest.store")


class SQLTransactionStore(TransactionStore):
    """Stores transactions as rows of the ``transactions`` table."""

    def __init__(self, settings: Settings | None = None, engine: Engine | None = None) -> None:
        """Initialize the store from an engine, or from the configured database URL."""
        if engine is None:
            engine = get_engine(settings.database_url if settings else None)
        self.engine = engine
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        init_db(self.engine)

    def store(self, transaction: Transaction) -> StoredTransaction:
        """Insert the transaction in its own session, mapping database errors to StorageFailure."""
        record = self.new_record(transaction)
        session = self.Session()
        try:
            session.add(TransactionRecord(**record.model_dump()))
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            msg = f"Database error while storing transaction {record.id}: {exc}"
            raise StorageFailure(msg) from exc
        finally:
            session.close()
        logger.debug(f"Inserted transaction row: id={record.id}")
        return record

    def get(self, record_id: str) -> StoredTransaction | None:
        """Retrieve a stored transaction by id."""
        session = self.Session()
        try:
            row = session.execute(select(TransactionRecord).where(TransactionRecord.id == record_id)).scalar_one_or_none()
            if row is None:
                return None
            return StoredTransaction(id=row.id, item=row.item, cost=row.cost, stored_at=row.stored_at)
        finally:
            session.close()

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self.engine.dispose()
