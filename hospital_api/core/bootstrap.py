"""
Bootstrap utilities for first-run storage initialization.
Provides the collection names and the records written when a collection
file does not exist yet.
"""
import logging
from datetime import date
from typing import Dict, List

from ..patients.models import Patient, Gender, PatientStatus, RiskLevel
from ..doctors.models import Doctor, DoctorStatus
from ..appointments.models import Appointment, AppointmentStatus
from ..admin.models import SystemUser, UserRole, AccountStatus
from .repository import now_timestamp
from .storage import Record

logger = logging.getLogger(__name__)

PATIENTS = "patients"
DOCTORS = "doctors"
APPOINTMENTS = "appointments"
RECORDS = "records"
INSIGHTS = "insights"
USERS = "users"
LOGS = "logs"

# Every collection created on first access, in creation order
COLLECTIONS = (PATIENTS, DOCTORS, APPOINTMENTS, RECORDS, INSIGHTS, USERS, LOGS)


def default_patients(now: str) -> List[Record]:
    """Seed patients"""
    patients = [
        Patient(
            id="1",
            name="John Doe",
            age=45,
            gender=Gender.MALE,
            phone="+1 234-567-8900",
            email="john.doe@email.com",
            condition="Hypertension",
            status=PatientStatus.ACTIVE,
            risk_level=RiskLevel.LOW,
            last_visit="2024-01-15",
            next_appointment="2024-01-25",
            ai_insight="Stable condition, medication compliance good",
            created_at=now,
            updated_at=now,
        ),
        Patient(
            id="2",
            name="Sarah Wilson",
            age=32,
            gender=Gender.FEMALE,
            phone="+1 234-567-8901",
            email="sarah.w@email.com",
            condition="Diabetes Type 2",
            status=PatientStatus.ACTIVE,
            risk_level=RiskLevel.MEDIUM,
            last_visit="2024-01-14",
            next_appointment="2024-01-20",
            ai_insight="AI suggests closer monitoring of blood sugar levels",
            created_at=now,
            updated_at=now,
        ),
    ]
    return [patient.to_record() for patient in patients]


def default_doctors(now: str) -> List[Record]:
    """Seed doctors"""
    doctors = [
        Doctor(
            id="1",
            name="Dr. Sarah Smith",
            specialization="Cardiologist",
            experience="15 years",
            email="sarah.smith@hospital.com",
            phone="+1 234-567-8900",
            location="Cardiology Wing, Floor 3",
            status=DoctorStatus.AVAILABLE,
            rating=4.9,
            patients=245,
            next_available="2:00 PM",
            created_at=now,
            updated_at=now,
        ),
        Doctor(
            id="2",
            name="Dr. Michael Johnson",
            specialization="Neurologist",
            experience="12 years",
            email="michael.j@hospital.com",
            phone="+1 234-567-8901",
            location="Neurology Wing, Floor 2",
            status=DoctorStatus.BUSY,
            rating=4.8,
            patients=189,
            next_available="4:30 PM",
            created_at=now,
            updated_at=now,
        ),
    ]
    return [doctor.to_record() for doctor in doctors]


def default_appointments(now: str) -> List[Record]:
    """Seed appointments; the single booking is dated today."""
    appointment = Appointment(
        id="1",
        patient_id="1",
        patient_name="John Doe",
        doctor_id="1",
        doctor_name="Dr. Sarah Smith",
        date=date.today().isoformat(),
        time="09:00 AM",
        duration="30 min",
        type="Regular Checkup",
        status=AppointmentStatus.SCHEDULED,
        ai_optimized=True,
        created_at=now,
        updated_at=now,
    )
    return [appointment.to_record()]


def default_users(now: str) -> List[Record]:
    """Seed system users"""
    admin = SystemUser(
        id="1",
        name="Admin User",
        email="admin@hospital.com",
        role=UserRole.ADMIN,
        status=AccountStatus.ACTIVE,
        permissions=["all"],
        created_at=now,
        updated_at=now,
    )
    return [admin.to_record()]


def default_collections() -> Dict[str, List[Record]]:
    """
    Build the seed data for every collection.

    Collections missing from the result are created empty.

    Returns:
        Dict mapping collection name to its seed records
    """
    logger.info("🚀 Building default hospital data for first run...")
    now = now_timestamp()
    return {
        PATIENTS: default_patients(now),
        DOCTORS: default_doctors(now),
        APPOINTMENTS: default_appointments(now),
        USERS: default_users(now),
    }
