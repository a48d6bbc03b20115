"""
SQLAlchemy-backed key-value store.

One row per key in ``stored_documents``. Works against any SQLAlchemy URL;
``sqlite:///:memory:`` is handy for tests.
"""

import logging
from typing import List, Optional

from sqlalchemy import create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..errors import StoreError
from .base import KeyValueStore
from .models import Base, StoredDocument


class SQLAlchemyKeyValueStore(KeyValueStore):
    def __init__(self, url: str = "sqlite:///pagestate.db"):
        self.url = url
        self.logger = logging.getLogger(__name__)
        engine_kwargs = {"future": True}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # Every session must see the same in-memory database
            engine_kwargs.update(
                connect_args={"check_same_thread": False}, poolclass=StaticPool
            )
        try:
            self.engine = create_engine(url, **engine_kwargs)
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Cannot open store {url}: {e}") from e
        self.Session = sessionmaker(self.engine, expire_on_commit=False, future=True)

    def get(self, key: str) -> Optional[str]:
        try:
            with self.Session() as session:
                row = session.get(StoredDocument, key)
                return row.value if row is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Read failed for {key!r}: {e}")
            raise StoreError(f"Read failed for {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with self.Session() as session:
                row = session.get(StoredDocument, key)
                if row is None:
                    session.add(StoredDocument(key=key, value=value))
                else:
                    row.value = value
                session.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Write failed for {key!r}: {e}")
            raise StoreError(f"Write failed for {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            with self.Session() as session:
                row = session.get(StoredDocument, key)
                if row is not None:
                    session.delete(row)
                    session.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Delete failed for {key!r}: {e}")
            raise StoreError(f"Delete failed for {key!r}: {e}") from e

    def keys(self) -> List[str]:
        try:
            with self.Session() as session:
                return list(session.execute(select(StoredDocument.key).order_by(StoredDocument.key)).scalars())
        except SQLAlchemyError as e:
            raise StoreError(f"Listing keys failed: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()
