def test_user_skills_require_authentication(client):
    assert client.get("/api/user-skills").status_code == 401
    assert client.post("/api/user-skills", json={"skillId": 1}).status_code == 401
    assert client.patch("/api/user-skills/1", json={"level": "advanced"}).status_code == 401
    assert client.delete("/api/user-skills/1").status_code == 401


def test_add_and_list_my_skills(client, register_user):
    user, headers = register_user("ana", user_type="both")

    response = client.post(
        "/api/user-skills",
        json={"skillId": 2, "isTeaching": True, "level": "intermediate"},
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json() == {
        "userId": user["id"],
        "skillId": 2,
        "isTeaching": True,
        "isLearning": False,
        "level": "intermediate",
    }

    listed = client.get("/api/user-skills", headers=headers).json()
    assert len(listed) == 1
    assert listed[0]["skill"]["name"] == "JavaScript"


def test_caller_cannot_add_skills_for_someone_else(client, register_user):
    register_user("ana")
    me, headers = register_user("bruno")

    response = client.post(
        "/api/user-skills",
        json={"skillId": 1, "userId": 1, "isLearning": True},
        headers=headers,
    )

    assert response.status_code == 201
    assert response.json()["userId"] == me["id"]


def test_adding_same_skill_twice_overwrites(client, register_user):
    _, headers = register_user("carla")

    client.post("/api/user-skills", json={"skillId": 4, "isLearning": True}, headers=headers)
    client.post("/api/user-skills", json={"skillId": 4, "isTeaching": True}, headers=headers)

    listed = client.get("/api/user-skills", headers=headers).json()
    assert len(listed) == 1
    assert listed[0]["isTeaching"] is True
    assert listed[0]["isLearning"] is False


def test_add_unknown_skill_is_404(client, register_user):
    _, headers = register_user("dani")

    response = client.post("/api/user-skills", json={"skillId": 99}, headers=headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Skill not found"}


def test_add_with_invalid_payload_is_400(client, register_user):
    _, headers = register_user("eva")

    response = client.post(
        "/api/user-skills",
        json={"level": "guru", "isTeaching": "sometimes"},
        headers=headers,
    )

    assert response.status_code == 400
    paths = {item["path"] for item in response.json()["error"]}
    assert paths == {"skillId", "level", "isTeaching"}


def test_patch_my_skill(client, register_user):
    _, headers = register_user("fabio")
    client.post("/api/user-skills", json={"skillId": 6, "isLearning": True}, headers=headers)

    response = client.patch(
        "/api/user-skills/6",
        json={"level": "advanced", "skillId": 1, "userId": 42},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["level"] == "advanced"
    assert body["isLearning"] is True
    assert body["skillId"] == 6
    assert body["userId"] != 42


def test_patch_missing_or_invalid(client, register_user):
    _, headers = register_user("gil")

    missing = client.patch("/api/user-skills/3", json={"isTeaching": True}, headers=headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "User skill not found"}

    client.post("/api/user-skills", json={"skillId": 3}, headers=headers)
    invalid = client.patch("/api/user-skills/3", json={"level": "master"}, headers=headers)
    assert invalid.status_code == 400


def test_delete_my_skill_is_idempotent(client, register_user):
    _, headers = register_user("hugo")
    client.post("/api/user-skills", json={"skillId": 5}, headers=headers)

    first = client.delete("/api/user-skills/5", headers=headers)
    second = client.delete("/api/user-skills/5", headers=headers)

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 204
    assert client.get("/api/user-skills", headers=headers).json() == []


def test_non_numeric_skill_id(client, register_user):
    _, headers = register_user("ines")
    client.post("/api/user-skills", json={"skillId": 2}, headers=headers)

    patched = client.patch("/api/user-skills/abc", json={"isTeaching": True}, headers=headers)
    assert patched.status_code == 404
    assert patched.json() == {"error": "User skill not found"}

    deleted = client.delete("/api/user-skills/abc", headers=headers)
    assert deleted.status_code == 204
    assert len(client.get("/api/user-skills", headers=headers).json()) == 1
