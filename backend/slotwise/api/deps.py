from collections.abc import Generator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from slotwise.core.config import get_settings
from slotwise.db.session import SessionLocal
from slotwise.engine.structure import TimetableStructure, default_structure
from slotwise.engine.workspace import ScheduleWorkspace
from slotwise.services.store import DocumentStore


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_structure() -> TimetableStructure:
    return default_structure(get_settings().sections)


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db, namespace=get_settings().store_namespace)


def get_workspace(
    store: DocumentStore = Depends(get_store),
    structure: TimetableStructure = Depends(get_structure),
) -> ScheduleWorkspace:
    return store.load_workspace(structure)
