"""Tests for the admin notification feed."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lms import models

API = "/api/v1"


def create_notification(
    db_session: Session, title: str, status_value: str = "unread", user_id: int = 1
) -> models.Notification:
    notification = models.Notification(
        title=title, message=f"{title} message", status=status_value, user_id=user_id
    )
    db_session.add(notification)
    db_session.commit()
    db_session.refresh(notification)
    return notification


class TestNotifications:
    """Test suite for the notification routes."""

    def test_list_newest_first(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        older = create_notification(db_session, "Older")
        newer = create_notification(db_session, "Newer")

        response = client.get(f"{API}/get-all-notifications", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        notifications = response.json()["notifications"]
        assert [item["id"] for item in notifications] == [newer.id, older.id]
        assert notifications[0]["status"] == "unread"
        assert notifications[0]["message"] == "Newer message"

    def test_mark_read_returns_feed(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        notification = create_notification(db_session, "Order placed")

        response = client.put(
            f"{API}/update-notification/{notification.id}", headers=admin_headers
        )

        assert response.status_code == status.HTTP_200_OK
        feed = response.json()["notifications"]
        assert feed[0]["id"] == notification.id
        assert feed[0]["status"] == "read"

    def test_mark_read_unknown(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.put(f"{API}/update-notification/9999", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "message": "Notification not found"}

    def test_delete_all_removes_only_read(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        create_notification(db_session, "Seen", status_value="read")
        unread = create_notification(db_session, "Unseen")

        response = client.delete(f"{API}/delete-all-notifications", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "All notifications deleted successfully"
        remaining = client.get(f"{API}/get-all-notifications", headers=admin_headers).json()
        assert [item["id"] for item in remaining["notifications"]] == [unread.id]

    def test_requires_admin(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.get(f"{API}/get-all-notifications", headers=user_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["message"] == "Role: user is not allowed to access this resource"
