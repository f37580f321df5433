# Simple SQLite key-value layer using SQLAlchemy for points and streak.

from __future__ import annotations
from sqlalchemy import create_engine, Column, Integer, String, delete
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.sql import select
from pathlib import Path
from typing import Optional
from .config import DB_PATH

Base = declarative_base()

class Entry(Base):
    __tablename__ = "kv_store"
    key = Column(String, primary_key=True)
    value = Column(Integer, nullable=False)

def default_url() -> str:
    return f"sqlite:///{DB_PATH}"

class KeyValueStore:
    """
    Durable integer store keyed by name.

    Missing keys read as None; callers decide the default. Every set_int
    commits immediately so values survive a restart.
    """

    def __init__(self, url: Optional[str] = None):
        self.url = url or default_url()
        self._engine = create_engine(self.url, echo=False, future=True)
        self._session = sessionmaker(bind=self._engine, autoflush=False, autocommit=False, future=True)

    def init(self) -> None:
        if self.url.startswith("sqlite:///"):
            Path(self.url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(self._engine)

    def get_int(self, key: str) -> Optional[int]:
        with self._session() as s:
            row = s.execute(select(Entry).where(Entry.key == key)).scalar_one_or_none()
            return int(row.value) if row is not None else None

    def set_int(self, key: str, value: int) -> None:
        with self._session() as s:
            # Upsert-like behavior
            row = s.execute(select(Entry).where(Entry.key == key)).scalar_one_or_none()
            if row is None:
                s.add(Entry(key=key, value=int(value)))
            else:
                row.value = int(value)
            s.commit()

    def clear(self) -> None:
        with self._session() as s:
            s.execute(delete(Entry))
            s.commit()

    def dispose(self) -> None:
        self._engine.dispose()
