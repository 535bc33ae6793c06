from datetime import timedelta

import pytest
from django.utils import timezone

from core.exceptions import Conflict
from premium.models import PremiumRequest

pytestmark = pytest.mark.django_db


def submit(client, **overrides):
    payload = {"reason": "I want the AI bar", "requestedFeature": "ai"}
    payload.update(overrides)
    return client.post("/api/premium-requests", payload, format="json")


def test_submit_request_uses_caller_identity(auth_client, user, other_user):
    response = submit(auth_client, userId=str(other_user.id), userEmail="spoof@example.com", status="approved")
    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == str(user.id)
    assert body["userEmail"] == user.email
    assert body["status"] == "pending"
    assert body["approvalEndDate"] is None


def test_reason_is_required(auth_client):
    response = auth_client.post("/api/premium-requests", {}, format="json")
    assert response.status_code == 400
    assert "reason" in response.json()["errors"]


def test_second_pending_request_conflicts(auth_client):
    assert submit(auth_client).status_code == 201
    assert submit(auth_client).status_code == 409


def test_listing_is_scoped(auth_client, other_client, admin_client):
    submit(auth_client)
    submit(other_client)
    assert len(auth_client.get("/api/premium-requests").json()) == 1
    assert len(admin_client.get("/api/premium-requests").json()) == 2


def test_owner_and_admin_can_read(auth_client, other_client, admin_client):
    request_id = submit(auth_client).json()["id"]
    assert auth_client.get(f"/api/premium-requests/{request_id}").status_code == 200
    assert admin_client.get(f"/api/premium-requests/{request_id}").status_code == 200
    assert other_client.get(f"/api/premium-requests/{request_id}").status_code == 404


def test_approval_grants_temporary_premium(auth_client, admin_client, user, admin_user):
    request_id = submit(auth_client).json()["id"]
    before = timezone.now()
    response = admin_client.patch(
        f"/api/premium-requests/{request_id}",
        {"status": "approved", "approvalDuration": 3, "reviewNotes": "ok"},
        format="json",
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "approved"
    assert body["approvalDuration"] == 3
    assert body["reviewedBy"] == str(admin_user.id)
    assert body["approvalEndDate"] - body["approvalStartDate"] == 3 * 24 * 60 * 60 * 1000

    user.refresh_from_db()
    assert user.temporary_premium_access is True
    assert user.temporary_premium_expiry >= before + timedelta(days=3)
    assert user.effective_role() == "paid"
    assert auth_client.get("/api/auth/me").json()["hasPremium"] is True


def test_approval_defaults_to_seven_days(auth_client, admin_client):
    request_id = submit(auth_client).json()["id"]
    body = admin_client.patch(f"/api/premium-requests/{request_id}", {"status": "approved"}, format="json").json()
    assert body["approvalDuration"] == 7


@pytest.mark.parametrize("days", [0, 366])
def test_approval_duration_bounds(auth_client, admin_client, days):
    request_id = submit(auth_client).json()["id"]
    response = admin_client.patch(
        f"/api/premium-requests/{request_id}", {"status": "approved", "approvalDuration": days}, format="json"
    )
    assert response.status_code == 400
    assert PremiumRequest.objects.get(pk=request_id).status == "pending"


def test_rejection_does_not_grant_access(auth_client, admin_client, user):
    request_id = submit(auth_client).json()["id"]
    response = admin_client.patch(
        f"/api/premium-requests/{request_id}", {"status": "rejected", "reviewNotes": "no"}, format="json"
    )
    assert response.json()["status"] == "rejected"
    assert response.json()["reviewNotes"] == "no"
    user.refresh_from_db()
    assert not user.has_premium()


def test_reviewing_twice_conflicts(auth_client, admin_client):
    request_id = submit(auth_client).json()["id"]
    admin_client.patch(f"/api/premium-requests/{request_id}", {"status": "rejected"}, format="json")
    response = admin_client.patch(f"/api/premium-requests/{request_id}", {"status": "approved"}, format="json")
    assert response.status_code == 409


def test_review_and_delete_are_admin_only(auth_client, admin_client):
    request_id = submit(auth_client).json()["id"]
    assert auth_client.patch(
        f"/api/premium-requests/{request_id}", {"status": "approved"}, format="json"
    ).status_code == 403
    assert auth_client.delete(f"/api/premium-requests/{request_id}").status_code == 403
    assert admin_client.delete(f"/api/premium-requests/{request_id}").status_code == 204
    assert not PremiumRequest.objects.exists()


def test_stale_copy_cannot_approve_after_rejection(auth_client, admin_user, user):
    request_id = submit(auth_client).json()["id"]
    first = PremiumRequest.objects.get(pk=request_id)
    stale = PremiumRequest.objects.get(pk=request_id)

    first.reject(admin_user, "no")
    with pytest.raises(Conflict):
        stale.approve(admin_user, 30)

    assert PremiumRequest.objects.get(pk=request_id).status == "rejected"
    user.refresh_from_db()
    assert user.temporary_premium_access is False
    assert not user.has_premium()


def test_stale_copy_cannot_reject_after_approval(auth_client, admin_user):
    request_id = submit(auth_client).json()["id"]
    first = PremiumRequest.objects.get(pk=request_id)
    stale = PremiumRequest.objects.get(pk=request_id)

    first.approve(admin_user, 5)
    with pytest.raises(Conflict):
        stale.reject(admin_user)

    approved = PremiumRequest.objects.get(pk=request_id)
    assert approved.status == "approved"
    assert approved.approval_duration == 5
