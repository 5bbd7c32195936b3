"""Tests for authentication: user model, login and logout."""

import pytest

from app.auth import services
from app.auth.models import User


class TestUserModel:
    def test_password_hashing(self) -> None:
        user = User(username="someone", email="someone@example.com")
        user.set_password("secret")

        assert user.password_hash != "secret"
        assert user.check_password("secret")
        assert not user.check_password("wrong")

    def test_empty_password_rejected(self) -> None:
        user = User(username="someone", email="someone@example.com")
        with pytest.raises(ValueError):
            user.set_password("")

    def test_check_password_without_hash(self) -> None:
        assert not User(username="someone", email="someone@example.com").check_password("anything")

    def test_username_and_email_normalized(self, session) -> None:
        user = User(username="  MixedCase ", email="Mixed@Example.COM")
        user.set_password("secret")
        session.add(user)
        session.commit()

        assert user.username == "mixedcase"
        assert user.email == "mixed@example.com"

    def test_to_dict_omits_password(self, admin_user) -> None:
        data = admin_user.to_dict()

        assert data["is_admin"] is True
        assert "password_hash" not in data


class TestAuthServices:
    def test_authenticate_user(self, admin_user) -> None:
        assert services.authenticate_user("ADMIN", "adminpass") == admin_user
        assert services.authenticate_user("admin", "wrong") is None
        assert services.authenticate_user("nobody", "adminpass") is None

    def test_inactive_user_cannot_authenticate(self, session, admin_user) -> None:
        admin_user.is_active = False
        session.commit()

        assert services.authenticate_user("admin", "adminpass") is None

    def test_create_user_rejects_duplicates(self, admin_user) -> None:
        with pytest.raises(ValueError):
            services.create_user("admin", "new@example.com", "pw")


class TestLoginRoutes:
    def test_login_page_renders(self, client) -> None:
        response = client.get("/auth/login")

        assert response.status_code == 200
        assert b"Sign in" in response.data

    def test_login_redirects_to_admin(self, auth, admin_user) -> None:
        response = auth.login("admin", "adminpass")

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/admin/categories")

    def test_login_respects_local_next(self, client, admin_user) -> None:
        response = client.post(
            "/auth/login?next=/admin/categories/new",
            data={"username": "admin", "password": "adminpass"},
        )

        assert response.headers["Location"].endswith("/admin/categories/new")

    def test_login_ignores_external_next(self, client, admin_user) -> None:
        response = client.post(
            "/auth/login",
            data={"username": "admin", "password": "adminpass", "next": "//evil.example.com/"},
        )

        assert response.headers["Location"].endswith("/admin/categories")

    @pytest.mark.parametrize(
        "next_page",
        [
            "http://x.example//evil.example.com/",
            "https://x.example/\\evil.example.com/",
            "/\\evil.example.com/",
        ],
    )
    def test_login_ignores_protocol_relative_next(self, client, admin_user, next_page) -> None:
        response = client.post(
            "/auth/login",
            data={"username": "admin", "password": "adminpass", "next": next_page},
        )

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/admin/categories")
        assert "evil.example.com" not in response.headers["Location"]

    def test_login_keeps_path_of_absolute_next(self, client, admin_user) -> None:
        response = client.post(
            "/auth/login",
            data={"username": "admin", "password": "adminpass", "next": "http://localhost/admin/categories/new"},
        )

        assert response.headers["Location"].endswith("/admin/categories/new")

    def test_account_page(self, client, auth, test_user) -> None:
        auth.login_as(test_user)

        response = client.get("/auth/account")

        assert response.status_code == 200
        assert b"Signed in as testuser_1" in response.data

    def test_invalid_login(self, auth, admin_user) -> None:
        response = auth.login("admin", "wrong")

        assert response.status_code == 200
        assert b"Invalid username or password" in response.data

    def test_logout(self, client, auth, admin_user) -> None:
        auth.login_as(admin_user)

        response = auth.logout()

        assert response.status_code == 302
        assert client.get("/admin/categories").status_code == 302


class TestUserCli:
    def test_create_admin_user(self, runner, session) -> None:
        result = runner.invoke(
            args=["user", "create", "--username", "boss", "--email", "boss@example.com", "--password", "pw", "--admin"]
        )

        assert result.exit_code == 0
        assert "Created admin user boss" in result.output
        assert session.query(User).filter_by(username="boss").one().is_admin

    def test_list_users(self, runner, admin_user) -> None:
        result = runner.invoke(args=["user", "list"])

        assert "admin@example.com" in result.output
        assert "Total users: 1" in result.output
