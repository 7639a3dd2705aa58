from __future__ import annotations

from src.workzen.workzen.core.enums import Role


def test_skill_lifecycle_over_http(client, users_repo, login):
    me = users_repo.add()
    login(me)

    created = client.post(f"/api/users/{me.user_id}/skills", json={"skill_name": "Flask"})
    assert created.status_code == 201
    skill_id = created.get_json()["skill_id"]

    listed = client.get(f"/api/users/{me.user_id}/skills").get_json()
    assert [s["skill_name"] for s in listed] == ["Flask"]

    assert client.delete(f"/api/skills/{skill_id}").get_json() == {"success": True}
    missing = client.delete(f"/api/skills/{skill_id}")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "Skill not found"


def test_certification_for_someone_else_is_forbidden(client, users_repo, login):
    me = users_repo.add()
    other = users_repo.add()
    login(me)

    resp = client.post(f"/api/users/{other.user_id}/certifications", json={"certification_name": "CKA"})

    assert resp.status_code == 403


def test_salary_components_over_http(client, users_repo, login):
    payroll = users_repo.add(role=Role.PAYROLL)
    employee = users_repo.add()
    login(payroll)

    assert client.get(f"/api/users/{employee.user_id}/salary-components").get_json() is None
    saved = client.post(
        f"/api/users/{employee.user_id}/salary-components",
        json={"monthly_wage": 45000, "pf_employee_percent": 12},
    )
    assert saved.status_code == 200
    assert saved.get_json()["pf_employee_percent"] == "12.00"

    login(employee)
    assert client.get(f"/api/users/{employee.user_id}/salary-components").get_json()["monthly_wage"] == 45000
    assert client.post(f"/api/users/{employee.user_id}/salary-components", json={}).status_code == 403
