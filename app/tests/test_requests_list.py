"""
Tests for listing requests (GET /api/requests)
"""
from datetime import datetime, timedelta

import pytest
from fastapi import status
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.models.request import ServiceRequest, RequestStatus


BASE_TIME = datetime(2026, 3, 1, 9, 0, 0)


@pytest.fixture
def seeded_requests(db: Session, employee, approver):
    """Five tenant requests with increasing created_at plus one from another tenant"""
    specs = [
        (employee, "LEAVE", RequestStatus.PENDING_MANAGER.value, {"startDate": "2026-03-10", "endDate": "2026-03-12"}),
        (employee, "ASSET", RequestStatus.APPROVED.value, {"itemName": "Laptop"}),
        (approver, "LEAVE", RequestStatus.APPROVED.value, {"startDate": "2026-04-01", "endDate": "2026-04-02"}),
        (approver, "LOAN", RequestStatus.REJECTED.value, {"amount": 5000, "installments": 10}),
        (employee, "LEAVE", RequestStatus.REJECTED.value, {"startDate": "2026-05-01", "endDate": "2026-05-03"}),
    ]
    created = []
    for offset, (owner, req_type, req_status, details) in enumerate(specs):
        req = ServiceRequest(
            company_id="COMP-001",
            user_id=owner.id,
            type=req_type,
            status=req_status,
            details=details,
            created_at=BASE_TIME + timedelta(hours=offset),
            updated_at=BASE_TIME + timedelta(hours=offset),
        )
        db.add(req)
        created.append(req)

    foreign = ServiceRequest(
        company_id="COMP-999",
        user_id=employee.id,
        type="LEAVE",
        status=RequestStatus.PENDING_MANAGER.value,
        details={"startDate": "2026-06-01", "endDate": "2026-06-02"},
        created_at=BASE_TIME + timedelta(days=30),
        updated_at=BASE_TIME + timedelta(days=30),
    )
    db.add(foreign)
    db.commit()
    for req in created:
        db.refresh(req)
    db.refresh(foreign)
    return created, foreign


def test_list_returns_all_tenant_requests_newest_first(client, seeded_requests):
    """Unfiltered listing returns every tenant row, newest first"""
    created, foreign = seeded_requests

    response = client.get("/api/requests")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [row["id"] for row in data] == [req.id for req in reversed(created)]
    assert foreign.id not in [row["id"] for row in data]
    assert all(row["company_id"] == "COMP-001" for row in data)


def test_list_rows_include_submitter_name_and_avatar(client, seeded_requests, employee):
    """Each row is joined with the submitter's name and avatar"""
    response = client.get("/api/requests", params={"type": "ASSET"})

    assert response.status_code == status.HTTP_200_OK
    [row] = response.json()
    assert row["user_id"] == employee.id
    assert row["user_name"] == "Sara Al-Harbi"
    assert row["avatar_url"] == "/uploads/avatars/avatar-1-seed.png"
    assert row["details"] == {"itemName": "Laptop"}
    assert row["approver_id"] is None
    assert row["created_at"].startswith("2026-03-01T10:00:00")


@pytest.mark.parametrize(
    "params",
    [
        {"type": "LEAVE"},
        {"status": "APPROVED"},
        {"type": "LEAVE", "status": "APPROVED"},
        {"type": "LEAVE", "status": "REJECTED"},
        {"type": "ASSET", "status": "REJECTED"},
        {"type": "UNKNOWN"},
    ],
)
def test_list_filters_are_exact_match_intersection(client, seeded_requests, params):
    """Filters combine with AND and match exactly"""
    created, _ = seeded_requests
    expected = [
        req.id for req in reversed(created)
        if all(getattr(req, field) == value for field, value in params.items())
    ]

    response = client.get("/api/requests", params=params)

    assert response.status_code == status.HTTP_200_OK
    assert [row["id"] for row in response.json()] == expected


def test_list_filter_is_case_sensitive(client, seeded_requests):
    """Lower-case values do not match upper-case stored types"""
    response = client.get("/api/requests", params={"type": "leave"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_list_ignores_company_id_query_param(client, seeded_requests):
    """Tenant scoping cannot be changed from the query string"""
    _, foreign = seeded_requests

    response = client.get("/api/requests", params={"company_id": "COMP-999"})

    assert response.status_code == status.HTTP_200_OK
    assert foreign.id not in [row["id"] for row in response.json()]


def test_list_empty(client, db):
    """No requests gives an empty array"""
    response = client.get("/api/requests")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_get_single_request(client, seeded_requests, approver):
    """A single request is returned with submitter info"""
    created, _ = seeded_requests
    target = created[3]

    response = client.get(f"/api/requests/{target.id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == target.id
    assert data["type"] == "LOAN"
    assert data["user_name"] == approver.full_name


def test_get_other_tenant_request_returns_404(client, seeded_requests):
    """Requests of another tenant are invisible"""
    _, foreign = seeded_requests

    response = client.get(f"/api/requests/{foreign.id}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Request not found"}


def test_list_store_failure_returns_generic_500(client, db):
    """A store error surfaces as a generic message"""
    db.execute(text("DROP TABLE requests"))
    db.commit()

    response = client.get("/api/requests")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Failed to fetch requests"}
