import pytest
from sqlalchemy.orm import Session

from models import User

LIST_URL = "/api/v1/list"
USER_URL = "/api/v1/user"


def create_list(client, auth, **body):
    body.setdefault("title", "Groceries")
    response = client.post(LIST_URL, json=body, auth=auth)
    assert response.status_code == 201, response.text
    return response.json()


class TestAuthentication:

    @pytest.mark.parametrize("method,path", [
        ("get", f"{LIST_URL}/all"),
        ("get", f"{LIST_URL}/1"),
        ("post", LIST_URL),
        ("put", f"{LIST_URL}/1"),
        ("delete", f"{LIST_URL}/1"),
        ("patch", f"{LIST_URL}/1/active/true"),
        ("patch", f"{LIST_URL}/1/task/add"),
        ("patch", f"{LIST_URL}/1/task/remove/1"),
        ("get", USER_URL),
    ])
    def test_protected_routes_require_credentials(self, client, method, path):
        response = client.request(method.upper(), path, json={})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"].startswith("Basic")

    def test_wrong_password(self, client, alice_auth):
        response = client.get(f"{LIST_URL}/all", auth=("alice", "not-the-password"))
        assert response.status_code == 401

    def test_unknown_user_gets_same_response_as_wrong_password(self, client, alice_auth):
        unknown = client.get(f"{LIST_URL}/all", auth=("mallory", "whatever-pass"))
        wrong = client.get(f"{LIST_URL}/all", auth=("alice", "not-the-password"))

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_registration_is_open(self, client):
        response = client.post(
            f"{USER_URL}/register",
            json={"username": "carol", "password": "carol-pass-1", "name": "Carol"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "carol"
        assert body["name"] == "Carol"
        assert body["roles"] == ["USER"]
        assert "password" not in body

    def test_user_without_role_is_forbidden(self, client, engine, register):
        frank_auth = register("frank", "frank-secret-1")
        with Session(engine) as session:
            frank = session.query(User).filter(User.username == "frank").one()
            frank.authorities.clear()
            session.commit()

        response = client.get(f"{LIST_URL}/all", auth=frank_auth)

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    def test_unknown_api_path_requires_credentials(self, client, alice_auth):
        anonymous = client.get("/api/v1/does-not-exist")
        authenticated = client.get("/api/v1/does-not-exist", auth=alice_auth)

        assert anonymous.status_code == 401
        assert authenticated.status_code == 404


class TestListRoutes:

    def test_create_and_get(self, client, alice_auth):
        created = create_list(client, alice_auth, description="Weekly")

        assert created["id"] == 1
        assert created["owner"] == "alice"
        assert created["active"] is True
        assert created["tasks"] == []

        response = client.get(f"{LIST_URL}/{created['id']}", auth=alice_auth)
        assert response.status_code == 200
        assert response.json() == created

    def test_get_all(self, client, alice_auth, bob_auth):
        create_list(client, alice_auth, title="A1")
        create_list(client, bob_auth, title="B1")
        create_list(client, alice_auth, title="A2")

        response = client.get(f"{LIST_URL}/all", auth=alice_auth)

        assert response.status_code == 200
        assert [l["title"] for l in response.json()] == ["A1", "A2"]

    def test_other_users_list_is_not_found(self, client, alice_auth, bob_auth):
        created = create_list(client, alice_auth)

        response = client.get(f"{LIST_URL}/{created['id']}", auth=bob_auth)

        assert response.status_code == 404
        assert response.json()["detail"] == f"ToDoList with id: {created['id']} belonging to User: bob not found"

    def test_create_without_title(self, client, alice_auth):
        response = client.post(LIST_URL, json={"description": "untitled"}, auth=alice_auth)

        assert response.status_code == 400
        assert response.json()["detail"]["invalid_fields"] == {"title": "must not be null"}

    def test_create_with_wrong_type(self, client, alice_auth):
        response = client.post(LIST_URL, json={"title": "ok", "active": "maybe"}, auth=alice_auth)

        assert response.status_code == 400
        assert "active" in response.json()["detail"]["invalid_fields"]

    def test_title_too_long(self, client, alice_auth):
        response = client.post(LIST_URL, json={"title": "x" * 101}, auth=alice_auth)

        assert response.status_code == 400
        assert "title" in response.json()["detail"]["invalid_fields"]

    def test_title_is_trimmed_before_length_check(self, client, alice_auth):
        created = create_list(client, alice_auth, title="  " + "x" * 100 + "  ")

        assert created["title"] == "x" * 100

    def test_whitespace_title_is_blank(self, client, alice_auth):
        response = client.post(LIST_URL, json={"title": "   "}, auth=alice_auth)

        assert response.status_code == 400
        assert response.json()["detail"]["invalid_fields"] == {"title": "must not be blank"}

    def test_update(self, client, alice_auth):
        created = create_list(client, alice_auth)

        response = client.put(
            f"{LIST_URL}/{created['id']}",
            json={"title": "Food", "id": 99, "created_at": "2000-01-01T00:00:00"},
            auth=alice_auth,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Food"
        assert body["id"] == created["id"]
        assert body["created_at"] == created["created_at"]

    def test_update_missing_list(self, client, alice_auth):
        response = client.put(f"{LIST_URL}/5", json={"title": "Food"}, auth=alice_auth)
        assert response.status_code == 404

    def test_delete(self, client, alice_auth):
        created = create_list(client, alice_auth)

        first = client.delete(f"{LIST_URL}/{created['id']}", auth=alice_auth)
        second = client.delete(f"{LIST_URL}/{created['id']}", auth=alice_auth)

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404

    def test_set_active(self, client, alice_auth):
        created = create_list(client, alice_auth)

        response = client.patch(f"{LIST_URL}/{created['id']}/active/false", auth=alice_auth)

        assert response.status_code == 200
        assert response.json()["active"] is False
        assert response.json()["finished_at"] is not None

    def test_set_active_on_missing_list(self, client, alice_auth):
        response = client.patch(f"{LIST_URL}/3/active/true", auth=alice_auth)
        assert response.status_code == 404


class TestTaskRoutes:

    def test_add_and_remove(self, client, alice_auth):
        created = create_list(client, alice_auth)

        added = client.patch(
            f"{LIST_URL}/{created['id']}/task/add", json={"name": "Milk"}, auth=alice_auth
        )
        assert added.status_code == 200
        tasks = added.json()["tasks"]
        assert [t["name"] for t in tasks] == ["Milk"]
        assert tasks[0]["completed"] is False

        removed = client.patch(
            f"{LIST_URL}/{created['id']}/task/remove/{tasks[0]['id']}", auth=alice_auth
        )
        assert removed.status_code == 200
        assert removed.json()["tasks"] == []

    def test_add_task_without_name(self, client, alice_auth):
        created = create_list(client, alice_auth)

        response = client.patch(f"{LIST_URL}/{created['id']}/task/add", json={}, auth=alice_auth)

        assert response.status_code == 400
        assert "name" in response.json()["detail"]["invalid_fields"]

    def test_remove_unknown_task(self, client, alice_auth):
        created = create_list(client, alice_auth)
        client.patch(f"{LIST_URL}/{created['id']}/task/add", json={"name": "Milk"}, auth=alice_auth)

        response = client.patch(f"{LIST_URL}/{created['id']}/task/remove/999", auth=alice_auth)

        assert response.status_code == 404
        assert response.json()["detail"] == f"ToDoList with id: {created['id']} does not contain Task with id: 999"
        current = client.get(f"{LIST_URL}/{created['id']}", auth=alice_auth).json()
        assert [t["name"] for t in current["tasks"]] == ["Milk"]

    def test_add_task_to_other_users_list(self, client, alice_auth, bob_auth):
        created = create_list(client, alice_auth)

        response = client.patch(
            f"{LIST_URL}/{created['id']}/task/add", json={"name": "Sneaky"}, auth=bob_auth
        )

        assert response.status_code == 404


class TestUserRoutes:

    def test_duplicate_registration(self, client, alice_auth):
        response = client.post(
            f"{USER_URL}/register", json={"username": "alice", "password": "another-pass"}
        )

        assert response.status_code == 400
        assert response.json()["detail"]["invalid_fields"] == {"username": "must be unique"}

    def test_registration_missing_password(self, client):
        response = client.post(f"{USER_URL}/register", json={"username": "dave"})

        assert response.status_code == 400
        assert "password" in response.json()["detail"]["invalid_fields"]

    def test_profile(self, client, alice_auth):
        response = client.get(USER_URL, auth=alice_auth)

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_update_profile(self, client, alice_auth):
        response = client.put(USER_URL, json={"email": "a@example.org"}, auth=alice_auth)

        assert response.status_code == 200
        assert response.json()["email"] == "a@example.org"

    def test_change_password(self, client, alice_auth):
        response = client.patch(
            f"{USER_URL}/password", json={"new_password": "rotated-secret"}, auth=alice_auth
        )
        assert response.status_code == 204

        assert client.get(USER_URL, auth=alice_auth).status_code == 401
        assert client.get(USER_URL, auth=("alice", "rotated-secret")).status_code == 200

    def test_change_password_policy(self, client, alice_auth):
        response = client.patch(f"{USER_URL}/password", json={"new_password": "tiny"}, auth=alice_auth)

        assert response.status_code == 400
        assert "new_password" in response.json()["detail"]["invalid_fields"]

    def test_non_ascii_password_is_rejected(self, client):
        response = client.post(
            f"{USER_URL}/register", json={"username": "erika", "password": "p\u00e4sswort-123"}
        )

        assert response.status_code == 400
        assert "password" in response.json()["detail"]["invalid_fields"]

    def test_non_ascii_password_change_is_rejected(self, client, alice_auth):
        response = client.patch(
            f"{USER_URL}/password", json={"new_password": "p\u00e4sswort-123"}, auth=alice_auth
        )

        assert response.status_code == 400
        assert "new_password" in response.json()["detail"]["invalid_fields"]
        assert client.get(USER_URL, auth=alice_auth).status_code == 200

    def test_printable_ascii_password_can_log_in(self, client, register):
        auth = register("erika", "p@ss w0rd~!{}")

        assert client.get(USER_URL, auth=auth).status_code == 200


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
