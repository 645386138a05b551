"""
Tests for User Views

회원가입/로그인/내 프로필 API 테스트
"""

import pytest
from django.contrib.auth import get_user_model
from opportunity.models import Category
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()


@pytest.mark.django_db
class TestUserRegistration:
    def setup_method(self):
        self.client = APIClient()
        self.tech = Category.objects.create(name="Tech")

    def test_register_with_category(self):
        """관심 카테고리를 지정해 회원가입"""
        # When
        response = self.client.post(
            "/api/v1/users/register/",
            data={
                "username": "ann",
                "email": "ann@example.com",
                "password": "secure-pass-1",
                "display_name": "Ann",
                "category": self.tech.id,
            },
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert "password" not in response.data
        user = User.objects.get(username="ann")
        assert user.category_id == self.tech.id
        assert user.check_password("secure-pass-1")

    def test_register_without_category(self):
        response = self.client.post(
            "/api/v1/users/register/",
            data={
                "username": "bob",
                "email": "bob@example.com",
                "password": "secure-pass-1",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(username="bob").category is None

    def test_register_rejects_numeric_password(self):
        response = self.client.post(
            "/api/v1/users/register/",
            data={
                "username": "kim",
                "email": "kim@example.com",
                "password": "12345678",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "password" in response.data

    def test_register_rejects_unknown_category(self):
        response = self.client.post(
            "/api/v1/users/register/",
            data={
                "username": "lee",
                "email": "lee@example.com",
                "password": "secure-pass-1",
                "category": self.tech.id + 100,
            },
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "category" in response.data


@pytest.mark.django_db
class TestUserLogin:
    def setup_method(self):
        self.client = APIClient()
        User.objects.create_user(
            username="ann", email="ann@example.com", password="secure-pass-1"
        )

    def test_login_returns_jwt_pair(self):
        response = self.client.post(
            "/api/v1/users/login/",
            data={"username": "ann", "password": "secure-pass-1"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["access"]
        assert response.data["refresh"]

    def test_login_with_wrong_password(self):
        response = self.client.post(
            "/api/v1/users/login/",
            data={"username": "ann", "password": "wrong-pass-1"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_access_token_authenticates_requests(self):
        tokens = self.client.post(
            "/api/v1/users/login/",
            data={"username": "ann", "password": "secure-pass-1"},
            format="json",
        ).data
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = self.client.get("/api/v1/users/me/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["username"] == "ann"


@pytest.mark.django_db
class TestUserMe:
    def setup_method(self):
        self.client = APIClient()
        self.design = Category.objects.create(name="Design")
        self.user = User.objects.create_user(
            username="ann", email="ann@example.com", password="secure-pass-1"
        )
        self.client.force_authenticate(user=self.user)

    def test_update_interest_category(self):
        """관심 카테고리 변경"""
        response = self.client.patch(
            "/api/v1/users/me/", data={"category": self.design.id}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["category_name"] == "Design"
        self.user.refresh_from_db()
        assert self.user.category_id == self.design.id

    def test_me_requires_authentication(self):
        self.client.force_authenticate(user=None)

        response = self.client.get("/api/v1/users/me/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
