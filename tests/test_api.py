"""End-to-end tests through the HTTP API."""
import pytest


def register_and_login(client, email, name="Test User", password="secret123"):
    response = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()


def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['access_token']}"}


def user_id(client, headers):
    return client.get("/api/auth/me", headers=headers).json()["id"]


@pytest.fixture
def alice(client):
    return auth_headers(register_and_login(client, "alice@example.com", "Alice Smith"))


@pytest.fixture
def bob(client):
    return auth_headers(register_and_login(client, "bob@example.com", "Bob Jones"))


@pytest.fixture
def workspace_id(client, alice):
    response = client.post("/api/workspaces", json={"name": "Engineering", "description": "Core"}, headers=alice)
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def project_id(client, alice, workspace_id):
    response = client.post(
        f"/api/workspaces/{workspace_id}/projects",
        json={"name": "Backend", "description": "API"},
        headers=alice,
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    body = client.get("/").json()
    assert body["docs"] == "/docs"


class TestAuthEndpoints:

    def test_register_and_login(self, client):
        tokens = register_and_login(client, "carol@example.com", "Carol King")

        assert tokens["token_type"] == "bearer"
        assert tokens["username"] == "carol@example.com"
        assert tokens["expires_in"] > 0
        me = client.get("/api/auth/me", headers=auth_headers(tokens))
        assert me.status_code == 200
        assert me.json()["avatar_initials"] == "CK"
        assert "password_hash" not in me.json()

    def test_register_duplicate_email(self, client):
        register_and_login(client, "carol@example.com")

        response = client.post("/api/auth/register", json={"email": "carol@example.com", "password": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_register_without_password(self, client):
        response = client.post("/api/auth/register", json={"email": "carol@example.com"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Password is required"

    def test_login_wrong_password(self, client):
        register_and_login(client, "carol@example.com")

        response = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Token abc"}, {"Authorization": "Bearer junk"}])
    def test_protected_route_rejects_bad_header(self, client, headers):
        response = client.get("/api/workspaces", headers=headers)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_refresh(self, client):
        tokens = register_and_login(client, "carol@example.com")

        response = client.post("/api/auth/refresh", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})
        assert response.status_code == 200
        assert client.get("/api/auth/me", headers=auth_headers(response.json())).status_code == 200

        response = client.post("/api/auth/refresh", headers=auth_headers(tokens))
        assert response.status_code == 401

    def test_refresh_token_is_not_an_access_token(self, client):
        tokens = register_and_login(client, "carol@example.com")

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})

        assert response.status_code == 401

    def test_update_profile_and_password(self, client, alice):
        response = client.put("/api/auth/me", json={"name": "Alice Cooper"}, headers=alice)
        assert response.json()["name"] == "Alice Cooper"

        response = client.put("/api/auth/me/password", json={"password": "changed!"}, headers=alice)
        assert response.status_code == 200
        login = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "changed!"})
        assert login.status_code == 200


class TestWorkspaceEndpoints:

    def test_create_and_read_workspace(self, client, alice, workspace_id):
        body = client.get(f"/api/workspaces/{workspace_id}", headers=alice).json()

        assert body["name"] == "Engineering"
        assert body["owner_email"] == "alice@example.com"
        assert body["owner_name"] == "Alice Smith"

    def test_duplicate_workspace_name(self, client, alice, workspace_id):
        response = client.post("/api/workspaces", json={"name": "Engineering"}, headers=alice)

        assert response.status_code == 400
        assert response.json()["detail"] == "Workspace with this name already exists"

    def test_blank_workspace_name(self, client, alice):
        response = client.post("/api/workspaces", json={"name": "  "}, headers=alice)

        assert response.status_code == 400

    def test_outsider_is_forbidden(self, client, alice, bob, workspace_id):
        response = client.get(f"/api/workspaces/{workspace_id}", headers=bob)

        assert response.status_code == 403
        assert response.json()["detail"] == "You are not a member of this workspace"

    def test_missing_workspace(self, client, alice):
        assert client.get("/api/workspaces/999", headers=alice).status_code == 404

    def test_listing_and_search(self, client, alice, bob, workspace_id):
        client.post("/api/workspaces", json={"name": "Platform"}, headers=bob)

        listed = client.get("/api/workspaces", headers=alice).json()
        assert [w["id"] for w in listed] == [workspace_id]

        found = client.get("/api/workspaces/search", params={"name": "ENGIN"}, headers=alice).json()
        assert [w["name"] for w in found] == ["Engineering"]
        assert client.get("/api/workspaces/search", params={"name": "plat"}, headers=alice).json() == []

        owner_id = user_id(client, alice)
        by_owner = client.get(f"/api/workspaces/owner/{owner_id}", headers=alice).json()
        assert [w["id"] for w in by_owner] == [workspace_id]

    def test_only_owner_updates_and_deletes(self, client, alice, bob, workspace_id):
        bob_id = user_id(client, bob)
        client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id, "role": "ADMIN"}, headers=alice)

        assert client.put(f"/api/workspaces/{workspace_id}", json={"name": "X"}, headers=bob).status_code == 403
        assert client.delete(f"/api/workspaces/{workspace_id}", headers=bob).status_code == 403

        response = client.put(f"/api/workspaces/{workspace_id}", json={"name": "Renamed"}, headers=alice)
        assert response.json()["name"] == "Renamed"
        assert client.delete(f"/api/workspaces/{workspace_id}", headers=alice).status_code == 204
        assert client.get(f"/api/workspaces/{workspace_id}", headers=alice).status_code == 404


class TestMemberEndpoints:

    def test_members_listing_needs_no_auth(self, client, workspace_id):
        response = client.get(f"/api/workspaces/{workspace_id}/members")

        assert response.status_code == 200
        assert [(m["user_email"], m["role"]) for m in response.json()] == [("alice@example.com", "ADMIN")]

    def test_add_member_grants_access(self, client, alice, bob, workspace_id):
        bob_id = user_id(client, bob)

        response = client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=alice)

        assert response.status_code == 201
        assert response.json()["role"] == "MEMBER"
        assert client.get(f"/api/workspaces/{workspace_id}", headers=bob).status_code == 200

    def test_add_member_twice(self, client, alice, bob, workspace_id):
        bob_id = user_id(client, bob)
        client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=alice)

        response = client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=alice)

        assert response.status_code == 400

    def test_non_owner_cannot_add_members(self, client, alice, bob, workspace_id):
        bob_id = user_id(client, bob)

        response = client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=bob)

        assert response.status_code == 403

    def test_change_role_and_remove(self, client, alice, bob, workspace_id):
        bob_id = user_id(client, bob)
        client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=alice)

        response = client.put(f"/api/workspaces/{workspace_id}/members/{bob_id}", json={"role": "VIEWER"}, headers=alice)
        assert response.json()["role"] == "VIEWER"

        assert client.delete(f"/api/workspaces/{workspace_id}/members/{bob_id}", headers=alice).status_code == 204
        assert client.get(f"/api/workspaces/{workspace_id}", headers=bob).status_code == 403

    def test_owner_cannot_be_removed(self, client, alice, workspace_id):
        alice_id = user_id(client, alice)

        response = client.delete(f"/api/workspaces/{workspace_id}/members/{alice_id}", headers=alice)

        assert response.status_code == 403
        assert response.json()["detail"] == "Cannot remove workspace owner"


class TestProjectEndpoints:

    def test_project_has_default_board(self, client, alice, project_id):
        columns = client.get(f"/api/projects/{project_id}/columns", headers=alice).json()

        assert [c["name"] for c in columns] == ["BACKLOG", "TO_DO", "IN_PROGRESS", "DONE"]
        assert [c["position"] for c in columns] == [1, 2, 3, 4]

    def test_scoped_project_routes(self, client, alice, workspace_id, project_id):
        other = client.post("/api/workspaces", json={"name": "Other"}, headers=alice).json()["id"]

        assert client.get(f"/api/workspaces/{workspace_id}/projects/{project_id}", headers=alice).status_code == 200
        assert client.get(f"/api/workspaces/{other}/projects/{project_id}", headers=alice).status_code == 404
        columns = client.get(f"/api/workspaces/{workspace_id}/projects/{project_id}/columns", headers=alice)
        assert len(columns.json()) == 4

    def test_only_creator_edits_project(self, client, alice, bob, workspace_id, project_id):
        bob_id = user_id(client, bob)
        client.post(f"/api/workspaces/{workspace_id}/members", json={"user_id": bob_id}, headers=alice)
        url = f"/api/workspaces/{workspace_id}/projects/{project_id}"

        assert client.put(url, json={"name": "Hijack"}, headers=bob).status_code == 403
        assert client.delete(url, headers=bob).status_code == 403
        assert client.put(url, json={"name": "Backend v2"}, headers=alice).json()["name"] == "Backend v2"
        assert client.delete(url, headers=alice).status_code == 204

    def test_outsider_cannot_see_projects(self, client, bob, workspace_id, project_id):
        assert client.get(f"/api/workspaces/{workspace_id}/projects", headers=bob).status_code == 403
        assert client.get(f"/api/projects/{project_id}/columns", headers=bob).status_code == 403


class TestTaskEndpoints:

    def test_task_flow_across_board(self, client, alice, project_id):
        response = client.post(f"/api/projects/{project_id}/tasks", json={"title": "Login page"}, headers=alice)
        assert response.status_code == 201
        task = response.json()
        assert task["column_name"] == "BACKLOG"
        assert task["priority"] == "MEDIUM"

        columns = {c["name"]: c["id"] for c in client.get(f"/api/projects/{project_id}/columns", headers=alice).json()}
        moved = client.patch(f"/api/tasks/{task['id']}/column/{columns['TO_DO']}", headers=alice)
        assert moved.status_code == 200

        fetched = client.get(f"/api/tasks/{task['id']}", headers=alice).json()
        assert fetched["column_name"] == "TO_DO"
        assert fetched["column_id"] == columns["TO_DO"]

        done = client.patch(f"/api/tasks/{task['id']}/column/{columns['DONE']}", headers=alice).json()
        assert done["completed_at"] is not None

        column_tasks = client.get(f"/api/columns/{columns['DONE']}/tasks", headers=alice).json()
        assert [t["id"] for t in column_tasks] == [task["id"]]

    def test_move_to_foreign_column(self, client, alice, workspace_id, project_id):
        other = client.post(f"/api/workspaces/{workspace_id}/projects", json={"name": "Other"}, headers=alice).json()
        foreign = client.get(f"/api/projects/{other['id']}/columns", headers=alice).json()[0]
        task = client.post(f"/api/projects/{project_id}/tasks", json={"title": "Stay"}, headers=alice).json()

        response = client.patch(f"/api/tasks/{task['id']}/column/{foreign['id']}", headers=alice)

        assert response.status_code == 400
        assert response.json()["detail"] == "Column does not belong to task's project"

    def test_update_and_assign(self, client, alice, bob, workspace_id, project_id):
        bob_id = user_id(client, bob)
        task = client.post(
            f"/api/workspaces/{workspace_id}/projects/{project_id}/tasks",
            json={"title": "Draft", "priority": "HIGH"},
            headers=alice,
        ).json()

        updated = client.put(
            f"/api/tasks/{task['id']}",
            json={"title": "Final", "priority": "LOW", "assigned_to_id": bob_id},
            headers=alice,
        ).json()
        assert updated["title"] == "Final"
        assert updated["assigned_to_name"] == "Bob Jones"
        assert updated["assigned_to_initials"] == "BJ"

        response = client.patch(f"/api/tasks/{task['id']}/assignee", json={"user_id": None}, headers=alice)
        assert response.json()["assigned_to_id"] is None

        response = client.put(f"/api/tasks/{task['id']}", json={"title": "X", "assigned_to_id": 999}, headers=alice)
        assert response.status_code == 404

    def test_task_listing(self, client, alice, workspace_id, project_id):
        for title in ("One", "Two"):
            client.post(f"/api/projects/{project_id}/tasks", json={"title": title}, headers=alice)

        listed = client.get(f"/api/projects/{project_id}/tasks", headers=alice).json()
        aliased = client.get(f"/api/workspaces/{workspace_id}/projects/{project_id}/tasks", headers=alice).json()

        assert [t["title"] for t in listed] == ["Two", "One"]
        assert listed == aliased

    def test_outsider_cannot_touch_tasks(self, client, alice, bob, project_id):
        task = client.post(f"/api/projects/{project_id}/tasks", json={"title": "Secret"}, headers=alice).json()

        assert client.get(f"/api/tasks/{task['id']}", headers=bob).status_code == 403
        assert client.delete(f"/api/tasks/{task['id']}", headers=bob).status_code == 403
        assert client.post(f"/api/projects/{project_id}/tasks", json={"title": "Sneaky"}, headers=bob).status_code == 403

    def test_delete_task(self, client, alice, project_id):
        task = client.post(f"/api/projects/{project_id}/tasks", json={"title": "Temp"}, headers=alice).json()

        assert client.delete(f"/api/tasks/{task['id']}", headers=alice).status_code == 204
        assert client.get(f"/api/tasks/{task['id']}", headers=alice).status_code == 404
