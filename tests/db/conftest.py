"""Database test specific fixtures and factory functions."""

from datetime import date

from src.txguard.db.models import Appointment


def create_appointment(db_session, **kwargs) -> Appointment:
    """
    Create an appointment, scheduled today unless told otherwise.

    Args:
        db_session: SQLAlchemy database session
        **kwargs: Optional fields to override defaults

    Returns:
        The persisted Appointment instance
    """
    appointment = Appointment(
        title=kwargs.get("title", "Dentist"),
        scheduled_on=kwargs.get("scheduled_on", date.today()),
    )

    db_session.add(appointment)
    db_session.commit()
    db_session.refresh(appointment)

    return appointment
