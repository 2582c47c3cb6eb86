"""Tests for profile and admin user management endpoints."""

import json

from fastapi import status
from fastapi.testclient import TestClient
from redis import Redis
from sqlalchemy.orm import Session

from lms import models
from lms.infrastructure.common.services.media_storage import LocalMediaStorage
from lms.infrastructure.identity.auth.password_service import PasswordService
from tests.conftest import (
    PNG_DATA_URL,
    TEST_PASSWORD,
    auth_headers,
    create_test_course,
    create_test_user,
)

API = "/api/v1"


def cached_review_course(client: TestClient, db_session: Session, author: models.User) -> int:
    """Create a course reviewed by the author and warm its cached public view."""
    course = create_test_course(db_session)
    db_session.add(models.Review(course_id=course.id, user_id=author.id, rating=4, comment="Good"))
    db_session.commit()
    client.get(f"{API}/get-course/{course.id}")
    return course.id


class TestMe:
    """Test suite for GET /me."""

    def test_me_returns_profile(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.get(f"{API}/me", headers=user_headers)

        assert response.status_code == status.HTTP_200_OK
        user = response.json()["user"]
        assert user["id"] == test_user.id
        assert user["name"] == "Test Student"
        assert user["role"] == "user"
        assert user["courses"] == []

    def test_me_lists_enrolled_courses(
        self,
        client: TestClient,
        enrolled_user: models.User,
        test_course: models.Course,
        cache: Redis,
    ) -> None:
        response = client.get(f"{API}/me", headers=auth_headers(enrolled_user, cache))

        assert response.json()["user"]["courses"] == [{"courseId": test_course.id}]


class TestUpdateUserInfo:
    """Test suite for PUT /update-user-info."""

    def test_update_name_and_email(
        self,
        client: TestClient,
        test_user: models.User,
        user_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        response = client.put(
            f"{API}/update-user-info",
            headers=user_headers,
            json={"name": "Renamed Student", "email": "renamed@example.com"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "User info updated successfully"
        assert data["user"]["name"] == "Renamed Student"
        assert data["user"]["email"] == "renamed@example.com"

        cached = json.loads(cache.get(str(test_user.id)))
        assert cached["name"] == "Renamed Student"

    def test_update_only_name_keeps_email(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.put(
            f"{API}/update-user-info", headers=user_headers, json={"name": "Only Name"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["email"] == test_user.email

    def test_rename_refreshes_cached_reviews(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        user_headers: dict[str, str],
    ) -> None:
        course_id = cached_review_course(client, db_session, test_user)

        client.put(f"{API}/update-user-info", headers=user_headers, json={"name": "Renamed"})

        course = client.get(f"{API}/get-course/{course_id}").json()["course"]
        assert course["reviews"][0]["user"]["name"] == "Renamed"

    def test_update_email_taken(
        self,
        client: TestClient,
        db_session: Session,
        user_headers: dict[str, str],
    ) -> None:
        create_test_user(db_session, email="taken@example.com")

        response = client.put(
            f"{API}/update-user-info", headers=user_headers, json={"email": "taken@example.com"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Email already exists"


class TestUpdatePassword:
    """Test suite for PUT /update-user-password."""

    def test_update_password(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        user_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"{API}/update-user-password",
            headers=user_headers,
            json={"oldPassword": TEST_PASSWORD, "newPassword": "brand-new-pass"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Password updated successfully"

        db_session.refresh(test_user)
        assert test_user.hashed_password is not None
        assert PasswordService().verify_password("brand-new-pass", test_user.hashed_password)

    def test_wrong_old_password(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.put(
            f"{API}/update-user-password",
            headers=user_headers,
            json={"oldPassword": "not-my-password", "newPassword": "brand-new-pass"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Old password is incorrect"

    def test_social_account_has_no_password(
        self, client: TestClient, db_session: Session, cache: Redis
    ) -> None:
        user = create_test_user(db_session, email="social@example.com", password=None)

        response = client.put(
            f"{API}/update-user-password",
            headers=auth_headers(user, cache),
            json={"oldPassword": "anything", "newPassword": "brand-new-pass"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid user"


class TestUpdateAvatar:
    """Test suite for PUT /update-avatar."""

    def test_upload_and_replace_avatar(
        self,
        client: TestClient,
        user_headers: dict[str, str],
        media_storage: LocalMediaStorage,
    ) -> None:
        first = client.put(f"{API}/update-avatar", headers=user_headers, json={"avatar": PNG_DATA_URL})

        assert first.status_code == status.HTTP_200_OK
        first_avatar = first.json()["user"]["avatar"]
        assert first_avatar["publicId"].startswith("avatars/")
        assert first_avatar["publicId"].endswith(".png")
        assert first_avatar["url"] == f"/media/{first_avatar['publicId']}"
        first_file = media_storage.root / first_avatar["publicId"]
        assert first_file.is_file()

        second = client.put(f"{API}/update-avatar", headers=user_headers, json={"avatar": PNG_DATA_URL})

        second_avatar = second.json()["user"]["avatar"]
        assert second_avatar["publicId"] != first_avatar["publicId"]
        assert not first_file.exists()
        assert (media_storage.root / second_avatar["publicId"]).is_file()

    def test_avatar_change_refreshes_cached_reviews(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        user_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        course_id = cached_review_course(client, db_session, test_user)
        assert cache.get(f"course-{course_id}") is not None

        client.put(f"{API}/update-avatar", headers=user_headers, json={"avatar": PNG_DATA_URL})

        assert cache.get(f"course-{course_id}") is None
        course = client.get(f"{API}/get-course/{course_id}").json()["course"]
        assert course["reviews"][0]["user"]["avatar"]["url"].startswith("/media/avatars/")

    def test_invalid_image_data(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.put(
            f"{API}/update-avatar", headers=user_headers, json={"avatar": "data:image/png;base64,@@@"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"].startswith("Invalid image data")


class TestAdminUsers:
    """Test suite for the admin user management routes."""

    def test_list_users_newest_first(
        self,
        client: TestClient,
        test_user: models.User,
        test_admin: models.User,
        admin_headers: dict[str, str],
    ) -> None:
        response = client.get(f"{API}/get-all-users", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        ids = [user["id"] for user in response.json()["users"]]
        assert ids == [test_admin.id, test_user.id]

    def test_update_role_refreshes_live_session(
        self,
        client: TestClient,
        test_user: models.User,
        user_headers: dict[str, str],
        admin_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        response = client.put(
            f"{API}/update-user-role", headers=admin_headers, json={"id": test_user.id, "role": "admin"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["role"] == "admin"
        assert json.loads(cache.get(str(test_user.id)))["role"] == "admin"

        # The promoted user can use admin routes straight away
        promoted = client.get(f"{API}/get-all-users", headers=user_headers)
        assert promoted.status_code == status.HTTP_200_OK

    def test_update_role_without_session(
        self,
        client: TestClient,
        test_user: models.User,
        admin_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        client.put(
            f"{API}/update-user-role", headers=admin_headers, json={"id": test_user.id, "role": "admin"}
        )

        assert cache.get(str(test_user.id)) is None

    def test_update_role_invalid_value(
        self, client: TestClient, test_user: models.User, admin_headers: dict[str, str]
    ) -> None:
        response = client.put(
            f"{API}/update-user-role", headers=admin_headers, json={"id": test_user.id, "role": "owner"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_role_unknown_user(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.put(
            f"{API}/update-user-role", headers=admin_headers, json={"id": 9999, "role": "admin"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "User not found"

    def test_delete_user(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        user_headers: dict[str, str],
        admin_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        user_id = test_user.id

        response = client.delete(f"{API}/delete-user/{user_id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "User deleted successfully"
        assert db_session.get(models.User, user_id) is None
        assert cache.get(str(user_id)) is None

    def test_delete_user_drops_cached_reviews(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        admin_headers: dict[str, str],
        cache: Redis,
    ) -> None:
        course_id = cached_review_course(client, db_session, test_user)
        assert cache.get(f"course-{course_id}") is not None

        client.delete(f"{API}/delete-user/{test_user.id}", headers=admin_headers)

        assert cache.get(f"course-{course_id}") is None
        assert cache.get("courses") is None

    def test_delete_unknown_user(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.delete(f"{API}/delete-user/9999", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_user_cannot_delete(
        self, client: TestClient, test_admin: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.delete(f"{API}/delete-user/{test_admin.id}", headers=user_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
