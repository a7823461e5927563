"""
Tests that stored records match the documented entity shapes.
"""
from hospital_api.admin.models import SystemLog, SystemUser, UserRole
from hospital_api.admin.service import SystemLogRepository
from hospital_api.appointments.models import Appointment, AppointmentStatus
from hospital_api.doctors.models import Doctor, DoctorStatus
from hospital_api.medical_records.models import MedicalRecord, RecordStatus
from hospital_api.medical_records.service import MedicalRecordRepository
from hospital_api.patients.models import Patient, RiskLevel


def test_seed_records_match_entity_shapes(store):
    patients = [Patient.model_validate(p) for p in store.read("patients")]
    doctors = [Doctor.model_validate(d) for d in store.read("doctors")]
    appointments = [Appointment.model_validate(a) for a in store.read("appointments")]
    users = [SystemUser.model_validate(u) for u in store.read("users")]

    assert [p.risk_level for p in patients] == [RiskLevel.LOW, RiskLevel.MEDIUM]
    assert [d.status for d in doctors] == [DoctorStatus.AVAILABLE, DoctorStatus.BUSY]
    assert appointments[0].status == AppointmentStatus.SCHEDULED
    assert appointments[0].patient_name == patients[0].name
    assert users[0].role == UserRole.ADMIN


def test_to_record_uses_camel_case_and_drops_unset(store):
    record = Patient.model_validate(store.read("patients")[0]).to_record()
    assert "riskLevel" in record
    assert "risk_level" not in record
    assert "address" not in record


def test_created_records_match_entity_shapes(empty_store):
    record = MedicalRecordRepository(empty_store).create({
        "patientId": "1",
        "patientName": "John Doe",
        "doctorId": "1",
        "doctorName": "Dr. Sarah Smith",
        "recordType": "Imaging",
        "date": "2024-01-15",
        "status": "Archived",
    })
    assert MedicalRecord.model_validate(record).status == RecordStatus.ARCHIVED

    entry = SystemLogRepository(empty_store).create({
        "userId": "1",
        "userName": "Admin User",
        "action": "Exported records",
        "resource": "records",
        "status": "warning",
    })
    assert SystemLog.model_validate(entry).timestamp == entry["timestamp"]
