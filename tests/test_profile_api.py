"""Tests for the /api/profile endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from conftest import login, register
from core.database import get_db
from main import app

EXPERIENCE = {
    "title": "Engineer",
    "company": "Acme",
    "location": "Remote",
    "from": "2019-01-01T00:00:00",
    "description": "Backend work",
}

EDUCATION = {
    "school": "MIT",
    "degree": "BSc",
    "fieldofstudy": "Computer Science",
    "from": "2014-09-01T00:00:00",
    "to": "2018-06-01T00:00:00",
    "current": False,
}


@pytest.fixture
def with_profile(client: TestClient, auth_headers: dict[str, str]) -> dict[str, str]:
    res = client.post("/api/profile", json={"status": "Developer", "skills": "js,node"},
                      headers=auth_headers)
    assert res.status_code == 200, res.text
    return auth_headers


def test_create_profile(client: TestClient, auth_headers: dict[str, str]) -> None:
    res = client.post("/api/profile", json={"status": "Developer", "skills": "js,node"},
                      headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Developer"
    assert body["skills"] == ["js", "node"]
    assert body["user"]["name"] == "Ada Lovelace"
    assert body["experience"] == []
    assert body["education"] == []


def test_create_profile_is_persisted(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.get("/api/profile", headers=with_profile)
    assert res.status_code == 200
    assert res.json()["status"] == "Developer"


def test_create_profile_missing_required(client: TestClient, auth_headers: dict[str, str]) -> None:
    res = client.post("/api/profile", json={"company": "Acme"}, headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == {
        "status": "Status field is required",
        "skills": "Skills field is required",
    }


@pytest.mark.parametrize("skills", [" , ,", ",", ["", "  "]])
def test_create_profile_blank_skills_rejected(client: TestClient, auth_headers: dict[str, str],
                                              skills) -> None:
    res = client.post("/api/profile", json={"status": "Developer", "skills": skills},
                      headers=auth_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == {"skills": "Skills field is required"}
    assert client.get("/api/profile", headers=auth_headers).status_code == 404


def test_create_profile_drops_blank_skill_items(client: TestClient, auth_headers: dict[str, str]) -> None:
    res = client.post("/api/profile", json={"status": "Developer", "skills": ["js", " ", "node"]},
                      headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["skills"] == ["js", "node"]


def test_update_keeps_single_profile(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.post("/api/profile", json={
        "status": "Senior Developer", "skills": ["python"], "company": "Acme",
        "twitter": "https://twitter.com/ada",
    }, headers=with_profile)

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Senior Developer"
    assert body["skills"] == ["python"]
    assert body["social"]["twitter"] == "https://twitter.com/ada"
    assert len(client.get("/api/profile/all").json()) == 1


def test_get_own_profile_not_found(client: TestClient, auth_headers: dict[str, str]) -> None:
    res = client.get("/api/profile", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["detail"] == {"noprofile": "There is no profile for this user"}


def test_public_reads(client: TestClient, with_profile: dict[str, str]) -> None:
    client.post("/api/profile", json={"status": "Developer", "skills": "js", "handle": "ada"},
                headers=with_profile)
    own = client.get("/api/profile", headers=with_profile).json()

    by_handle = client.get("/api/profile/handle/ada")
    assert by_handle.status_code == 200
    assert by_handle.json()["id"] == own["id"]

    by_user = client.get(f"/api/profile/user/{own['user']['id']}")
    assert by_user.status_code == 200
    assert by_user.json()["id"] == own["id"]

    assert client.get("/api/profile/handle/nobody").status_code == 404
    assert client.get("/api/profile/user/not-an-object-id").status_code == 404
    assert client.get("/api/profile/user/5f0000000000000000000000").status_code == 404


def test_list_all(client: TestClient, with_profile: dict[str, str]) -> None:
    register(client, name="Grace Hopper", email="grace@example.com")
    grace = {"Authorization": f"Bearer {login(client, email='grace@example.com')}"}
    client.post("/api/profile", json={"status": "Admiral", "skills": "cobol"}, headers=grace)

    res = client.get("/api/profile/all")
    assert res.status_code == 200
    names = sorted(p["user"]["name"] for p in res.json())
    assert names == ["Ada Lovelace", "Grace Hopper"]


def test_list_all_empty(client: TestClient) -> None:
    res = client.get("/api/profile/all")
    assert res.status_code == 404
    assert res.json()["detail"] == {"noprofile": "There are no profiles"}


def test_handle_taken_by_another_user(client: TestClient, with_profile: dict[str, str]) -> None:
    client.post("/api/profile", json={"status": "Developer", "skills": "js", "handle": "ada"},
                headers=with_profile)
    register(client, name="Grace Hopper", email="grace@example.com")
    grace = {"Authorization": f"Bearer {login(client, email='grace@example.com')}"}

    res = client.post("/api/profile", json={"status": "Admiral", "skills": "cobol", "handle": "ada"},
                      headers=grace)
    assert res.status_code == 400
    assert res.json()["detail"] == {"handle": "That handle already exists"}


def test_add_experience_goes_first(client: TestClient, with_profile: dict[str, str]) -> None:
    first = client.post("/api/profile/experience", json=EXPERIENCE, headers=with_profile).json()
    assert len(first["experience"]) == 1
    old = first["experience"][0]
    assert old["current"] is True
    assert old["from"].startswith("2019-01-01")

    res = client.post("/api/profile/experience",
                      json={**EXPERIENCE, "title": "Lead", "from": "2021-01-01T00:00:00"},
                      headers=with_profile)
    assert res.status_code == 200
    exp = res.json()["experience"]
    assert [e["title"] for e in exp] == ["Lead", "Engineer"]
    assert exp[1]["id"] == old["id"]


def test_add_experience_invalid(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.post("/api/profile/experience", json={"title": "Engineer"}, headers=with_profile)
    assert res.status_code == 400
    assert set(res.json()["detail"]) == {"company", "from"}


def test_add_experience_bad_date(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.post("/api/profile/experience", json={**EXPERIENCE, "from": "yesterday"},
                      headers=with_profile)
    assert res.status_code == 422


def test_add_experience_without_profile(client: TestClient, auth_headers: dict[str, str]) -> None:
    res = client.post("/api/profile/experience", json=EXPERIENCE, headers=auth_headers)
    assert res.status_code == 404


def test_delete_experience(client: TestClient, with_profile: dict[str, str]) -> None:
    client.post("/api/profile/experience", json=EXPERIENCE, headers=with_profile)
    body = client.post("/api/profile/experience", json={**EXPERIENCE, "title": "Lead"},
                       headers=with_profile).json()
    target = body["experience"][1]["id"]

    res = client.delete(f"/api/profile/experience/{target}", headers=with_profile)
    assert res.status_code == 200
    exp = res.json()["experience"]
    assert len(exp) == 1
    assert exp[0]["title"] == "Lead"
    assert target not in [e["id"] for e in exp]


def test_delete_unknown_experience_is_noop(client: TestClient, with_profile: dict[str, str]) -> None:
    client.post("/api/profile/experience", json=EXPERIENCE, headers=with_profile)
    before = client.get("/api/profile", headers=with_profile).json()["experience"]

    res = client.delete("/api/profile/experience/5f0000000000000000000000", headers=with_profile)
    assert res.status_code == 200
    assert res.json()["experience"] == before


def test_add_and_delete_education(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.post("/api/profile/education", json=EDUCATION, headers=with_profile)
    assert res.status_code == 200
    edu = res.json()["education"]
    assert edu[0]["school"] == "MIT"
    assert edu[0]["current"] is False

    res = client.delete(f"/api/profile/education/{edu[0]['id']}", headers=with_profile)
    assert res.status_code == 200
    assert res.json()["education"] == []


def test_add_education_invalid(client: TestClient, with_profile: dict[str, str]) -> None:
    res = client.post("/api/profile/education", json={"school": "MIT"}, headers=with_profile)
    assert res.status_code == 400
    assert set(res.json()["detail"]) == {"degree", "fieldofstudy", "from"}


def test_delete_account(client: TestClient, with_profile: dict[str, str]) -> None:
    user_id = client.get("/api/auth", headers=with_profile).json()["id"]

    res = client.delete("/api/profile", headers=with_profile)
    assert res.status_code == 200
    assert res.json() == {"success": True}

    assert client.get(f"/api/profile/user/{user_id}").status_code == 404
    res = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert res.status_code == 401


class _FailingCollection:
    async def find_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("mongo:27017: timed out")


class _FailingDb:
    def __getitem__(self, name: str) -> _FailingCollection:
        return _FailingCollection()


def test_database_error_is_500(client: TestClient) -> None:
    async def _broken_db():
        yield _FailingDb()

    app.dependency_overrides[get_db] = _broken_db

    res = client.get("/api/profile/user/5f0000000000000000000000")

    assert res.status_code == 500
    assert res.json() == {"detail": "Database error"}
