"""ORM models of the sample application."""

from .appointment import Appointment

__all__ = ["Appointment"]
