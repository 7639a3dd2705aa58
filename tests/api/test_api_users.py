from __future__ import annotations

from src.workzen.workzen.core.enums import Role


def test_requests_without_session_are_rejected(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Not authenticated"}


def test_login_and_me(client, users_repo, login):
    user = users_repo.add(name="Emma", basic_salary=30000)

    body = login(user).get_json()

    assert body["name"] == "Emma"
    assert "password_hash" not in body
    assert body["basic_salary"] == 30000
    assert client.get("/api/auth/me").get_json()["user_id"] == user.user_id


def test_bad_login_is_401(client, users_repo):
    user = users_repo.add()
    resp = client.post("/api/auth/login", json={"email": user.email, "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid credentials"


def test_directory_hides_salary_from_employees(client, users_repo, login):
    me = users_repo.add(basic_salary=100, hra=10)
    users_repo.add(basic_salary=999, hra=99)
    login(me)

    rows = client.get("/api/users/directory").get_json()

    by_id = {r["user_id"]: r for r in rows}
    assert by_id[me.user_id]["basic_salary"] == 100
    other = next(r for uid, r in by_id.items() if uid != me.user_id)
    assert "basic_salary" not in other
    assert "annual_leave" not in other
    assert all("password_hash" not in r for r in rows)


def test_back_office_sees_salary(client, users_repo, login):
    hr = users_repo.add(role=Role.HR)
    users_repo.add(basic_salary=999)
    login(hr)

    rows = client.get("/api/users").get_json()

    assert {r["basic_salary"] for r in rows} >= {999}


def test_employee_cannot_list_users(client, users_repo, login):
    login(users_repo.add())
    assert client.get("/api/users").status_code == 403


def test_hr_creates_employee(client, users_repo, login):
    login(users_repo.add(role=Role.HR))

    resp = client.post(
        "/api/users",
        json={"name": "New Hire", "email": "new@workzen.local", "department": "Ops", "year_of_joining": 2025},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["login_id"] == "WZNH20250001"
    assert body["generated_password"]


def test_create_validation_error_is_400(client, users_repo, login):
    login(users_repo.add(role=Role.ADMIN))
    resp = client.post("/api/users", json={"name": "", "email": "x@y.co", "department": "Ops"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Name is required"


def test_payroll_officer_patch_ignores_profile_fields(client, users_repo, login):
    target = users_repo.add(name="Same")
    login(users_repo.add(role=Role.PAYROLL))

    resp = client.patch(f"/api/users/{target.user_id}", json={"hra": 5000, "name": "Changed"})

    assert resp.status_code == 200
    assert resp.get_json()["hra"] == 5000
    assert resp.get_json()["name"] == "Same"


def test_unknown_user_is_404(client, users_repo, login):
    login(users_repo.add(role=Role.ADMIN))
    assert client.get("/api/users/999").status_code == 404


def test_permissions_round_trip(client, users_repo, login):
    target = users_repo.add()
    login(users_repo.add(role=Role.ADMIN))

    saved = client.post(f"/api/users/{target.user_id}/permissions", json={"payroll": "view"})
    fetched = client.get(f"/api/users/{target.user_id}/permissions")

    assert saved.status_code == 200
    assert fetched.get_json()["payroll"] == "view"
    assert fetched.get_json()["settings"] == "none"
