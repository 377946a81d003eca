"""API endpoints for appointments."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import true
from sqlalchemy.orm import Session

from src.txguard import dependencies
from src.txguard.api.schemas import (
    AppointmentCreateRequest,
    AppointmentListResponse,
    AppointmentResponse,
)
from src.txguard.db.models import Appointment

router = APIRouter()


def _list_for(db: Session, condition) -> AppointmentListResponse:
    appointments = (
        db.query(Appointment).filter(condition).order_by(Appointment.id).all()
    )
    return AppointmentListResponse(
        items=[AppointmentResponse.model_validate(a) for a in appointments],
        total=len(appointments),
    )


@router.post("/appointments", response_model=AppointmentResponse, status_code=201)
def create_appointment(
    request: AppointmentCreateRequest,
    db: Session = Depends(dependencies.get_db_session),
) -> AppointmentResponse:
    """Schedule a new appointment."""
    appointment = Appointment(title=request.title, scheduled_on=request.scheduled_on)
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    return AppointmentResponse.model_validate(appointment)


@router.get("/appointments/today", response_model=AppointmentListResponse)
def list_today(
    db: Session = Depends(dependencies.get_db_session),
) -> AppointmentListResponse:
    """List appointments scheduled today."""
    return _list_for(db, Appointment.scheduled_today())


@router.get("/appointments", response_model=AppointmentListResponse)
def list_appointments(
    day: Optional[date] = Query(None, description="Only appointments on this day."),
    db: Session = Depends(dependencies.get_db_session),
) -> AppointmentListResponse:
    """List appointments, optionally restricted to one day."""
    condition = Appointment.scheduled_on_day(day) if day else true()
    return _list_for(db, condition)
