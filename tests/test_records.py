"""
Tests for the medical record endpoints.
"""


def test_records_start_empty(client):
    response = client.get("/api/records")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_file_record(client):
    response = client.post("/api/records", json={
        "patientId": "1",
        "patientName": "John Doe",
        "doctorId": "1",
        "doctorName": "Dr. Sarah Smith",
        "recordType": "Lab Results",
        "date": "2024-01-15",
        "status": "Pending Review",
        "fileSize": "2.4 MB",
        "aiSummary": "AI analysis: results within normal range",
    })
    assert response.status_code == 201
    record = response.json()["data"]
    assert record["recordType"] == "Lab Results"
    assert client.get("/api/records").json()["data"] == [record]


def test_records_have_no_item_routes(client):
    response = client.get("/api/records/1")
    assert response.status_code in (404, 405)
    assert response.json()["success"] is False
