"""Tests for order placement and the admin order list."""

import json
from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from redis import Redis
from sqlalchemy.orm import Session

from lms import models
from lms.infrastructure.notifications.repositories import NotificationRepository
from tests.conftest import RecordingMailService, auth_headers, create_test_user

API = "/api/v1"


class TestCreateOrder:
    """Test suite for POST /create-order."""

    def test_create_order_enrolls_user(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_course: models.Course,
        user_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        response = client.post(
            f"{API}/create-order",
            headers=user_headers,
            json={"courseId": test_course.id, "paymentInfo": {"id": "pi_123", "status": "succeeded"}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["message"] == "Order created successfully"
        assert data["order"]["courseId"] == test_course.id
        assert data["order"]["userId"] == test_user.id
        assert data["order"]["paymentInfo"] == {"id": "pi_123", "status": "succeeded"}

        enrollments = db_session.query(models.Enrollment).filter_by(user_id=test_user.id).all()
        assert [item.course_id for item in enrollments] == [test_course.id]

        db_session.refresh(test_course)
        assert test_course.purchased == 1

        session = json.loads(cache.get(str(test_user.id)))
        assert session["courses"] == [{"courseId": test_course.id}]

    def test_create_order_sends_confirmation(
        self,
        client: TestClient,
        test_user: models.User,
        test_course: models.Course,
        user_headers: dict[str, str],
        mail_service: RecordingMailService,
    ) -> None:
        order_id = client.post(
            f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id}
        ).json()["order"]["id"]

        sent = mail_service.sent_to(test_user.email, "order-confirmation.html")
        assert len(sent) == 1
        assert sent[0]["subject"] == "Order Confirmed"
        order = sent[0]["data"]["order"]
        assert order["id"] == str(order_id)
        assert order["items"] == [{"title": "Python Fundamentals", "quantity": 1, "price": 49.0}]
        assert order["total_amount"] == 49.0
        assert sent[0]["data"]["dashboard_url"].endswith("/dashboard")

    def test_create_order_notifies_admins(
        self,
        client: TestClient,
        db_session: Session,
        test_course: models.Course,
        user_headers: dict[str, str],
    ) -> None:
        client.post(f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id})

        notification = db_session.query(models.Notification).one()
        assert notification.title == "New Course Enrolled"
        assert notification.message == "You have successfully enrolled in Python Fundamentals"
        assert notification.status == "unread"

    def test_order_survives_notification_failure(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_course: models.Course,
        user_headers: dict[str, str],
        mail_service: RecordingMailService,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def failing_create(*args: Any, **kwargs: Any) -> models.Notification:
            raise RuntimeError("notification store unavailable")

        monkeypatch.setattr(NotificationRepository, "create", failing_create)

        response = client.post(
            f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id}
        )

        assert response.status_code == status.HTTP_201_CREATED
        db_session.refresh(test_course)
        assert test_course.purchased == 1
        assert db_session.query(models.Notification).count() == 0
        assert len(mail_service.sent_to(test_user.email, "order-confirmation.html")) == 1

    def test_purchase_count_reaches_public_view(
        self,
        client: TestClient,
        db_session: Session,
        test_course: models.Course,
        user_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        assert client.get(f"{API}/get-course/{test_course.id}").json()["course"]["purchased"] == 0
        other = create_test_user(db_session, email="other@example.com")

        client.post(f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id})
        client.post(
            f"{API}/create-order", headers=auth_headers(other, cache), json={"courseId": test_course.id}
        )

        assert client.get(f"{API}/get-course/{test_course.id}").json()["course"]["purchased"] == 2

    def test_order_unlocks_course_content(
        self, client: TestClient, test_course: models.Course, user_headers: dict[str, str]
    ) -> None:
        locked = client.get(f"{API}/get-course-content/{test_course.id}", headers=user_headers)
        assert locked.status_code == status.HTTP_400_BAD_REQUEST

        client.post(f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id})

        unlocked = client.get(f"{API}/get-course-content/{test_course.id}", headers=user_headers)
        assert unlocked.status_code == status.HTTP_200_OK

    def test_order_twice(
        self,
        client: TestClient,
        db_session: Session,
        test_course: models.Course,
        user_headers: dict[str, str],
    ) -> None:
        client.post(f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id})

        response = client.post(
            f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "You are already enrolled in this course"
        assert db_session.query(models.Order).count() == 1

    def test_order_unknown_course(
        self, client: TestClient, db_session: Session, user_headers: dict[str, str]
    ) -> None:
        response = client.post(f"{API}/create-order", headers=user_headers, json={"courseId": 9999})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Course not found"
        assert db_session.query(models.Order).count() == 0

    def test_order_requires_login(self, client: TestClient, test_course: models.Course) -> None:
        response = client.post(f"{API}/create-order", json={"courseId": test_course.id})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetAllOrders:
    """Test suite for GET /get-all-orders."""

    def test_lists_orders_newest_first(
        self,
        client: TestClient,
        db_session: Session,
        test_course: models.Course,
        user_headers: dict[str, str],
        admin_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        other = create_test_user(db_session, email="other@example.com")
        first = client.post(
            f"{API}/create-order", headers=user_headers, json={"courseId": test_course.id}
        ).json()["order"]
        second = client.post(
            f"{API}/create-order", headers=auth_headers(other, cache), json={"courseId": test_course.id}
        ).json()["order"]

        response = client.get(f"{API}/get-all-orders", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [order["id"] for order in response.json()["orders"]] == [second["id"], first["id"]]

    def test_requires_admin(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.get(f"{API}/get-all-orders", headers=user_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
