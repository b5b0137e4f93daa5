import pytest
from fastapi import status


class TestLeaveRequests:
    """Test leave request endpoints"""

    def test_create_leave_request(self, client, employee_login):
        response = client.post(
            "/leave-requests",
            json={
                "start_date": "2024-06-10",
                "end_date": "2024-06-12",
                "leave_type": "Annual Leave",
                "reason": "Personal leave"
            }
        )
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["reason"] == "Personal leave"
        assert data["status"] == "PENDING"
        assert data["total_days"] == 3
        assert data["employee_name"] == "Employee Test"

    def test_default_leave_type(self, client, employee_login):
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-10", "end_date": "2024-06-10", "reason": "Errand"}
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["leave_type"] == "Annual Leave"

    def test_create_requires_login(self, client):
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-10", "end_date": "2024-06-12", "reason": "Personal leave"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_leave_invalid_date_range(self, client, employee_login):
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-12", "end_date": "2024-06-10", "reason": "Invalid dates"}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["code"] == "END_BEFORE_START"

    def test_create_overlapping_leave(self, client, employee_login):
        client.post(
            "/leave-requests",
            json={"start_date": "2024-06-10", "end_date": "2024-06-12", "reason": "First"}
        )
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-12", "end_date": "2024-06-14", "reason": "Second"}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()["detail"]
        assert detail["code"] == "OVERLAPS_EXISTING"
        assert detail["conflict_start"] == "2024-06-10"
        assert detail["conflict_end"] == "2024-06-12"

    def test_create_too_long(self, client, employee_login):
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-07-01", "end_date": "2024-07-31", "reason": "Sabbatical"}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["code"] == "DURATION_TOO_LONG"
        assert response.json()["detail"]["max_days"] == 30

    def test_reason_too_long(self, client, employee_login):
        response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-10", "end_date": "2024-06-10", "reason": "x" * 501}
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_list_leave_requests(self, client, employee_login):
        for start, end in [("2024-06-10", "2024-06-10"), ("2024-06-20", "2024-06-21")]:
            client.post(
                "/leave-requests",
                json={"start_date": start, "end_date": end, "reason": "Vacation"}
            )

        response = client.get("/leave-requests")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 2
        assert data[0]["id"] > data[1]["id"]

    def test_get_leave_request(self, client, employee_login):
        create_response = client.post(
            "/leave-requests",
            json={"start_date": "2024-06-20", "end_date": "2024-06-22", "reason": "Medical leave"}
        )
        leave_id = create_response.json()["id"]

        response = client.get(f"/leave-requests/{leave_id}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["reason"] == "Medical leave"

    def test_get_missing_leave_request(self, client, employee_login):
        response = client.get("/leave-requests/4242")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["code"] == "NOT_FOUND"

    def test_list_leave_types(self, client):
        response = client.get("/leave-requests/leave-types")
        assert response.status_code == status.HTTP_200_OK
        assert "Sick Leave" in response.json()
