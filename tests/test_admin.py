"""
Tests for the admin endpoints: system users, logs and health.
"""
from hospital_api.main import app
from hospital_api.admin.service import get_log_repository, SystemLogRepository


def test_list_users_returns_seed_admin(client):
    users = client.get("/api/admin/users").json()["data"]
    assert len(users) == 1
    assert users[0]["email"] == "admin@hospital.com"
    assert users[0]["permissions"] == ["all"]


def test_user_crud(client):
    created = client.post("/api/admin/users", json={
        "name": "Nora Nurse",
        "email": "nora@hospital.com",
        "role": "nurse",
        "department": "Emergency",
        "status": "active",
    })
    assert created.status_code == 201
    user = created.json()["data"]
    assert user["permissions"] == []

    suspended = client.put(f"/api/admin/users/{user['id']}", json={"status": "suspended"})
    assert suspended.json()["data"]["status"] == "suspended"
    assert suspended.json()["data"]["department"] == "Emergency"

    assert client.get(f"/api/admin/users/{user['id']}").json()["data"]["status"] == "suspended"
    assert client.delete(f"/api/admin/users/{user['id']}").json() == {"success": True, "message": "User deleted"}
    assert client.get(f"/api/admin/users/{user['id']}").status_code == 404


def test_missing_user(client):
    response = client.put("/api/admin/users/missing", json={"status": "inactive"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "User not found"}


def test_create_and_list_logs(client):
    response = client.post("/api/admin/logs", json={
        "userId": "1",
        "userName": "Admin User",
        "action": "Updated patient",
        "resource": "patients/1",
        "status": "success",
    })
    assert response.status_code == 201
    entry = response.json()["data"]
    assert entry["timestamp"]

    logs = client.get("/api/admin/logs").json()["data"]
    assert logs == [entry]


def test_logs_are_capped(client, store):
    app.dependency_overrides[get_log_repository] = lambda: SystemLogRepository(store, retention=5)
    for i in range(8):
        client.post("/api/admin/logs", json={"action": f"event {i}"})

    logs = client.get("/api/admin/logs").json()["data"]
    assert [log["action"] for log in logs] == [f"event {i}" for i in range(3, 8)]


def test_health(client, store):
    response = client.get("/api/admin/health")
    assert response.status_code == 200
    health = response.json()["data"]
    assert health["status"] == "healthy"
    assert health["database"] == "connected"
    assert health["api"] == "operational"
    assert health["storage"] == 100
    assert 0 <= health["storageUsed"] <= 100
    assert health["activeUsers"] == 1
    assert health["timestamp"].endswith("Z")


def test_health_counts_only_active_users(client):
    client.post("/api/admin/users", json={"name": "A", "role": "doctor", "status": "active"})
    client.post("/api/admin/users", json={"name": "B", "role": "doctor", "status": "inactive"})
    assert client.get("/api/admin/health").json()["data"]["activeUsers"] == 2
