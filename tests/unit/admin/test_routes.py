"""Tests for the admin category create/edit views."""

from unittest.mock import patch

from flask import url_for

from app.admin import routes as admin_routes
from app.categories import services as category_services
from app.categories.models import Category
from app.utils.messages import FlashMessages


class TestAccessControl:
    """Only logged-in admins reach the admin panel."""

    def test_anonymous_is_redirected_to_login(self, client) -> None:
        response = client.get("/admin/categories")

        assert response.status_code == 302
        assert "/auth/login" in response.headers["Location"]

    def test_non_admin_is_redirected_to_account(self, client, auth, test_user) -> None:
        auth.login_as(test_user)

        response = client.get("/admin/categories")

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/auth/account")
        with client.session_transaction() as sess:
            assert ("danger", FlashMessages.ADMIN_REQUIRED) in sess["_flashes"]

    def test_non_admin_lands_on_account_page(self, client, auth, test_user) -> None:
        auth.login_as(test_user)

        response = client.get("/admin/categories/new", follow_redirects=True)

        assert response.status_code == 200
        assert b"Signed in as testuser_1" in response.data
        assert FlashMessages.ADMIN_REQUIRED.encode() in response.data

    def test_dashboard_redirects_to_category_list(self, admin_client) -> None:
        response = admin_client.get("/admin/")

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/admin/categories")


class TestListCategories:
    def test_list_shows_categories(self, admin_client, test_category) -> None:
        response = admin_client.get("/admin/categories")

        assert response.status_code == 200
        assert b"Test Category" in response.data

    def test_list_search(self, admin_client, test_category) -> None:
        category_services.create_category({"name": "Garden"})

        response = admin_client.get("/admin/categories?search=gard")

        assert b"Garden" in response.data
        assert b"Test Category" not in response.data

    def test_list_empty(self, admin_client) -> None:
        response = admin_client.get("/admin/categories")

        assert b"No categories found" in response.data


class TestCreateCategory:
    def test_new_form_renders_in_create_mode(self, admin_client) -> None:
        with patch.object(admin_routes.category_services, "get_category") as get_category:
            response = admin_client.get("/admin/categories/new")

        assert response.status_code == 200
        assert b"New Category" in response.data
        get_category.assert_not_called()

    def test_create_then_redirect_to_list(self, admin_client, session) -> None:
        response = admin_client.post(
            "/admin/categories/new",
            data={"name": "Books", "description": "All books", "color": "#fd7e14"},
        )

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/admin/categories")
        category = category_services.find_category_by_name("Books")
        assert category is not None
        assert category.color == "#fd7e14"

    def test_create_flashes_success(self, admin_client) -> None:
        response = admin_client.post("/admin/categories/new", data={"name": "Books"}, follow_redirects=True)

        assert response.status_code == 200
        assert b"Category created successfully!" in response.data

    def test_create_invalid_rerenders_form(self, admin_client) -> None:
        response = admin_client.post("/admin/categories/new", data={"name": ""})

        assert response.status_code == 200
        assert b"Name is required" in response.data
        assert Category.query.count() == 0

    def test_create_duplicate_reports_on_name(self, admin_client, test_category) -> None:
        response = admin_client.post("/admin/categories/new", data={"name": "test category"})

        assert response.status_code == 200
        assert b"already exists" in response.data
        assert Category.query.count() == 1


class TestEditCategory:
    def test_route_id_triggers_get_category(self, admin_client, session) -> None:
        session.add(Category(id=5, name="Five"))
        session.commit()

        with patch.object(
            admin_routes.category_services, "get_category", wraps=category_services.get_category
        ) as get_category:
            response = admin_client.get("/admin/categories/5")

        get_category.assert_called_once_with(5)
        assert response.status_code == 200
        assert b'value="Five"' in response.data

    def test_unknown_id_is_404(self, admin_client) -> None:
        response = admin_client.get("/admin/categories/999")

        assert response.status_code == 404
        assert b"Category not found." in response.data

    def test_update_uses_loaded_category_id(self, admin_client, test_category) -> None:
        with patch.object(
            admin_routes.category_services, "update_category", wraps=category_services.update_category
        ) as update_category:
            response = admin_client.post(
                f"/admin/categories/{test_category.id}",
                data={"name": "Renamed", "color": "#000000"},
            )

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/admin/categories")
        category_id, data = update_category.call_args.args
        assert category_id == test_category.id
        assert data["name"] == "Renamed"
        assert category_services.get_category(test_category.id).name == "Renamed"

    def test_update_duplicate_name(self, admin_client, test_category) -> None:
        category_services.create_category({"name": "Other"})

        response = admin_client.post(f"/admin/categories/{test_category.id}", data={"name": "Other"})

        assert response.status_code == 200
        assert b"already exists" in response.data
        assert category_services.get_category(test_category.id).name == "Test Category"

    def test_update_unknown_id_is_404(self, admin_client) -> None:
        response = admin_client.post("/admin/categories/999", data={"name": "Nope"})

        assert response.status_code == 404


class TestDeleteCategory:
    def test_delete_redirects_to_list(self, admin_client, test_category, session) -> None:
        category_id = test_category.id

        response = admin_client.post(f"/admin/categories/{category_id}/delete")

        assert response.status_code == 302
        assert session.get(Category, category_id) is None

    def test_delete_unknown_is_404(self, admin_client) -> None:
        response = admin_client.post("/admin/categories/999/delete")

        assert response.status_code == 404

    def test_delete_requires_post(self, admin_client, test_category) -> None:
        response = admin_client.get(url_for("admin.delete_category", category_id=test_category.id))

        assert response.status_code == 405
