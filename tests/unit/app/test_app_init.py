"""Tests for the application factory, error handlers and response headers."""

from app import create_app
from app.extensions import db


def test_create_app_uses_testing_config(app) -> None:
    assert app.testing
    assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite:///:memory:"
    assert app.config["WTF_CSRF_ENABLED"] is False


def test_blueprints_registered(app) -> None:
    assert {"admin", "api", "auth", "errors"} <= set(app.blueprints)


def test_cli_commands_registered(app) -> None:
    assert {"categories", "user", "init-db"} <= set(app.cli.commands)


def test_index_redirects_to_admin(client) -> None:
    response = client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/categories")


def test_security_headers(client) -> None:
    response = client.get("/auth/login")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Content-Security-Policy" in response.headers


def test_api_404_is_json(client) -> None:
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json == {"status": "error", "message": "Page not found", "code": 404}


def test_web_404_renders_page(client) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert b"Page not found" in response.data


def test_unhandled_exception_returns_500(app, client) -> None:
    @app.route("/boom")
    def boom():
        raise RuntimeError("boom")

    response = client.get("/boom")

    assert response.status_code == 500
    assert b"An unexpected error occurred" in response.data


def test_init_db_command(runner) -> None:
    db.drop_all()

    result = runner.invoke(args=["init-db"])

    assert result.exit_code == 0
    assert "Database tables created" in result.output


def test_csrf_header_added_when_enabled(monkeypatch) -> None:
    monkeypatch.setattr("config.UnitTestConfig.WTF_CSRF_ENABLED", True)
    csrf_app = create_app("testing")

    with csrf_app.test_client() as client:
        response = client.get("/api/v1/health")

    assert response.headers.get("X-CSRFToken")
