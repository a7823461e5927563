"""
Dashboard Service - Cross-collection statistics for the landing page.
"""
import asyncio
from datetime import date
from typing import Any, Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from ..appointments.service import AppointmentRepository, appointments_on
from ..core.storage import JsonStore, Record
from ..doctors.service import DoctorRepository, is_available
from ..patients.service import PatientRepository
from .models import DashboardStats

# Revenue is not tracked by any collection yet; the dashboard shows this figure
PLACEHOLDER_REVENUE = 68000


def compute_dashboard_stats(
    patients: List[Record],
    appointments: List[Record],
    doctors: List[Record],
    today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Fold the three collections into the dashboard counters.

    Args:
        patients: Full patient collection
        appointments: Full appointment collection
        doctors: Full doctor collection
        today: Local date counted as today (defaults to the current date)

    Returns:
        Dict: Statistics record with camelCase keys
    """
    stats = DashboardStats(
        total_patients=len(patients),
        today_appointments=len(appointments_on(appointments, today or date.today())),
        active_doctors=sum(1 for doctor in doctors if is_available(doctor)),
        total_revenue=PLACEHOLDER_REVENUE,
        total_doctors=len(doctors),
    )
    return stats.to_record()


async def get_dashboard_stats(store: JsonStore, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Read patients, appointments and doctors concurrently and compute the stats.

    Nothing is cached; every call reads the three collections again.
    """
    patients, appointments, doctors = await asyncio.gather(
        run_in_threadpool(PatientRepository(store).get_all),
        run_in_threadpool(AppointmentRepository(store).get_all),
        run_in_threadpool(DoctorRepository(store).get_all),
    )
    return compute_dashboard_stats(patients, appointments, doctors, today)
