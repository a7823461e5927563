"""
Tests for the repository CRUD contracts.
"""
import threading

import pytest

from hospital_api.admin.service import SystemLogRepository, UserRepository
from hospital_api.appointments.service import AppointmentRepository
from hospital_api.core.repository import now_timestamp, parse_timestamp
from hospital_api.doctors.service import DoctorRepository
from hospital_api.exceptions import ResourceNotFoundException
from hospital_api.medical_records.service import MedicalRecordRepository
from hospital_api.patients.service import PatientRepository

PATIENT = {
    "name": "Grace Hopper",
    "age": 61,
    "gender": "Female",
    "phone": "+1 555-0100",
    "email": "grace@example.com",
    "condition": "Asthma",
    "status": "active",
    "riskLevel": "medium",
}

REPOSITORIES = [PatientRepository, DoctorRepository, AppointmentRepository, MedicalRecordRepository, UserRepository]


@pytest.mark.parametrize("repository_class", REPOSITORIES)
def test_create_then_get_by_id_round_trips(empty_store, repository_class):
    repository = repository_class(empty_store)
    created = repository.create(PATIENT)

    fetched = repository.get_by_id(created["id"])
    assert fetched == created
    for key, value in PATIENT.items():
        assert fetched[key] == value
    assert set(fetched) - set(PATIENT) >= {"id", "createdAt", "updatedAt"}


def test_create_assigns_server_fields(empty_store):
    repository = PatientRepository(empty_store)
    created = repository.create({**PATIENT, "id": "client-id", "createdAt": "yesterday"})

    assert created["id"] != "client-id"
    assert created["id"].isdigit()
    assert created["createdAt"] == created["updatedAt"]
    assert parse_timestamp(created["createdAt"]) is not None
    assert created["createdAt"].endswith("Z")


def test_create_preserves_insertion_order(empty_store):
    repository = PatientRepository(empty_store)
    names = ["first", "second", "third"]
    for name in names:
        repository.create({"name": name})
    assert [p["name"] for p in repository.get_all()] == names


def test_ids_unique_for_rapid_creates(empty_store):
    repository = PatientRepository(empty_store)
    ids = [repository.create({"name": str(i)})["id"] for i in range(50)]
    assert len(set(ids)) == 50


def test_get_by_id_missing_returns_none(store):
    assert PatientRepository(store).get_by_id("does-not-exist") is None


def test_update_merges_patch(store):
    repository = PatientRepository(store)
    original = repository.get_by_id("1")

    updated = repository.update("1", {"status": "critical", "riskLevel": "high"})

    assert updated["status"] == "critical"
    assert updated["riskLevel"] == "high"
    for key in original:
        if key not in ("status", "riskLevel", "updatedAt"):
            assert updated[key] == original[key]
    assert repository.get_by_id("1") == updated


def test_update_refreshes_updated_at_strictly(empty_store):
    repository = PatientRepository(empty_store)
    created = repository.create(PATIENT)

    first = repository.update(created["id"], {"age": 62})
    second = repository.update(created["id"], {"age": 63})

    assert parse_timestamp(first["updatedAt"]) > parse_timestamp(created["updatedAt"])
    assert parse_timestamp(second["updatedAt"]) > parse_timestamp(first["updatedAt"])
    assert second["createdAt"] == created["createdAt"]


def test_back_to_back_updates_never_repeat_updated_at(empty_store):
    repository = PatientRepository(empty_store)
    previous = repository.create(PATIENT)["updatedAt"]

    for age in range(200):
        current = repository.update(repository.get_all()[0]["id"], {"age": age})["updatedAt"]
        assert parse_timestamp(current) > parse_timestamp(previous)
        previous = current


def test_now_timestamp_with_previous_in_same_millisecond():
    previous = now_timestamp()
    assert parse_timestamp(now_timestamp(previous)) > parse_timestamp(previous)


def test_update_ignores_id_and_created_at(store):
    repository = PatientRepository(store)
    original = repository.get_by_id("1")
    updated = repository.update("1", {"id": "99", "createdAt": "2000-01-01T00:00:00.000Z"})
    assert updated["id"] == "1"
    assert updated["createdAt"] == original["createdAt"]


@pytest.mark.parametrize("repository_class,label", [
    (PatientRepository, "Patient"),
    (DoctorRepository, "Doctor"),
    (AppointmentRepository, "Appointment"),
    (MedicalRecordRepository, "Record"),
    (UserRepository, "User"),
])
def test_update_missing_raises_not_found(store, repository_class, label):
    repository = repository_class(store)
    before = repository.get_all()

    with pytest.raises(ResourceNotFoundException) as exc_info:
        repository.update("missing", {"name": "x"})

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == f"{label} not found"
    assert repository.get_all() == before


def test_delete_is_idempotent(store):
    repository = DoctorRepository(store)

    assert repository.delete("2") is True
    assert all(d["id"] != "2" for d in repository.get_all())
    assert repository.delete("2") is False
    assert all(d["id"] != "2" for d in repository.get_all())
    assert len(repository.get_all()) == 1


def test_delete_missing_leaves_collection_unchanged(store):
    repository = AppointmentRepository(store)
    before = repository.get_all()
    assert repository.delete("missing") is False
    assert repository.get_all() == before


def test_user_create_defaults_permissions(empty_store):
    repository = UserRepository(empty_store)
    plain = repository.create({"name": "Nina", "role": "nurse", "status": "active"})
    granted = repository.create({"name": "Ada", "role": "admin", "permissions": ["all"]})
    assert plain["permissions"] == []
    assert granted["permissions"] == ["all"]


def test_log_create_assigns_id_and_timestamp(empty_store):
    repository = SystemLogRepository(empty_store)
    entry = repository.create({
        "userId": "1",
        "userName": "Admin User",
        "action": "login",
        "resource": "session",
        "status": "success",
        "timestamp": "client supplied",
    })
    assert entry["id"].isdigit()
    assert entry["timestamp"] != "client supplied"
    assert "createdAt" not in entry
    assert repository.get_all() == [entry]


def test_log_keeps_most_recent_hundred(empty_store):
    repository = SystemLogRepository(empty_store, retention=100)
    for i in range(150):
        repository.create({"action": f"action-{i}"})

    logs = repository.get_all()
    assert len(logs) == 100
    assert [log["action"] for log in logs] == [f"action-{i}" for i in range(50, 150)]


def test_log_retention_is_configurable(empty_store):
    repository = SystemLogRepository(empty_store, retention=3)
    for i in range(5):
        repository.create({"action": str(i)})
    assert [log["action"] for log in repository.get_all()] == ["2", "3", "4"]


def test_now_timestamp_is_after_previous():
    future = "2999-01-01T00:00:00.000Z"
    assert now_timestamp(future) == "2999-01-01T00:00:00.001Z"
    assert parse_timestamp(now_timestamp("garbage")) is not None


def test_concurrent_creates_lose_nothing(empty_store):
    repository = PatientRepository(empty_store)
    errors = []

    def create_many(worker):
        try:
            for i in range(20):
                repository.create({"name": f"{worker}-{i}"})
        except Exception as e:
            errors.append(e)

    workers = [threading.Thread(target=create_many, args=(w,)) for w in range(8)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join(timeout=30)

    records = repository.get_all()
    assert errors == []
    assert len(records) == 160
    assert len({record["id"] for record in records}) == 160
    assert {record["name"] for record in records} == {f"{w}-{i}" for w in range(8) for i in range(20)}


def test_concurrent_updates_keep_every_field(store):
    repository = PatientRepository(store)

    def set_field(index):
        repository.update("1", {f"note{index}": index})

    workers = [threading.Thread(target=set_field, args=(i,)) for i in range(10)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join(timeout=30)

    record = repository.get_by_id("1")
    assert all(record[f"note{i}"] == i for i in range(10))
    assert len(repository.get_all()) == 2
