from datetime import datetime
from enum import Enum

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from slotwise.db.base import Base


class DocumentKind(str, Enum):
    roster = "roster"
    schedule = "schedule"
    unavailability = "unavailability"
    calendar = "calendar"


class ScheduleDocument(Base):
    __tablename__ = "schedule_documents"

    namespace: Mapped[str] = mapped_column(String(100), primary_key=True)
    kind: Mapped[str] = mapped_column(String(50), primary_key=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)
    revision: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
