from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Column, Date, DateTime, Integer, String

from src.txguard.db.database import Base


class Appointment(Base):
    """
    A scheduled appointment.

    Exposes named query scopes so tests and endpoints share one predicate
    for "appointments on a given day".
    """

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    scheduled_on = Column(Date, nullable=False, index=True)
    created_at = Column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def scheduled_on_day(cls, day: date):
        """Scope: appointments scheduled on ``day``."""
        return cls.scheduled_on == day

    @classmethod
    def scheduled_today(cls, today: Optional[date] = None):
        """Scope: appointments scheduled today."""
        return cls.scheduled_on_day(today or date.today())

    def __repr__(self):
        return f"<Appointment(id={self.id}, title={self.title!r}, scheduled_on={self.scheduled_on})>"
