"""
Dashboard Models - Derived counters shown on the dashboard landing page.
"""
from ..core.schemas import CamelModel

class DashboardStats(CamelModel):
    """
    Dashboard statistics

    Fields:
    - total_patients: Number of stored patients
    - today_appointments: Appointments dated today that are not cancelled
    - active_doctors: Doctors whose status is available
    - total_revenue: Placeholder figure, not derived from data
    - total_doctors: Number of stored doctors
    """
    total_patients: int
    today_appointments: int
    active_doctors: int
    total_revenue: int
    total_doctors: int
