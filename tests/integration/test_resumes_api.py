"""
API tests for resumes, their skill associations and the resume builder.
"""


def create_resume(client, title="Backend CV", content=None, headers=None):
    response = client.post(
        "/api/resumes", json={"title": title, "content": content}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def unlock_directly(client, skill_id, level=1):
    response = client.post(f"/api/skills/user/{skill_id}", json={"level": level})
    assert response.status_code == 200


def resume_skill_names(client, resume_id):
    response = client.get(f"/api/resumes/{resume_id}/skills")
    assert response.status_code == 200
    return [item["skill_name"] for item in response.json()]


class TestResumeCrud:
    def test_create_list_get(self, client, other_user_headers):
        resume = create_resume(client)

        assert resume["content"] == ""
        assert [r["id"] for r in client.get("/api/resumes").json()] == [resume["id"]]
        assert client.get("/api/resumes", headers=other_user_headers).json() == []
        assert (
            client.get(f"/api/resumes/{resume['id']}", headers=other_user_headers).status_code
            == 404
        )

    def test_update(self, client):
        resume = create_resume(client)

        response = client.put(
            f"/api/resumes/{resume['id']}", json={"content": "Ten years of SQL"}
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Ten years of SQL"
        assert response.json()["title"] == "Backend CV"

    def test_update_without_fields(self, client):
        resume = create_resume(client)

        response = client.put(f"/api/resumes/{resume['id']}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "No fields to update"

    def test_delete(self, client):
        resume = create_resume(client)

        assert client.delete(f"/api/resumes/{resume['id']}").status_code == 200
        assert client.get(f"/api/resumes/{resume['id']}").status_code == 404


class TestResumeSkills:
    """Association rules between resumes and the skill ledger."""

    def test_add_requires_unlocked_skill(self, client, skill_ids):
        resume = create_resume(client)

        response = client.post(f"/api/resumes/{resume['id']}/skills/{skill_ids['SQL']}")

        assert response.status_code == 404
        assert response.json()["message"] == "Skill not found in your skills"

    def test_add_unknown_skill_reports_not_unlocked(self, client):
        resume = create_resume(client)

        response = client.post(f"/api/resumes/{resume['id']}/skills/99999")

        assert response.status_code == 404
        assert response.json()["message"] == "Skill not found in your skills"

    def test_add_and_duplicate(self, client, skill_ids):
        sql = skill_ids["SQL"]
        unlock_directly(client, sql, level=3)
        resume = create_resume(client)

        first = client.post(f"/api/resumes/{resume['id']}/skills/{sql}")
        second = client.post(f"/api/resumes/{resume['id']}/skills/{sql}")

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.json()["type"] == "conflict"
        skills = client.get(f"/api/resumes/{resume['id']}/skills").json()
        assert [(s["skill_name"], s["user_level"]) for s in skills] == [("SQL", 3)]

    def test_resume_of_another_user(self, client, skill_ids, other_user_headers):
        sql = skill_ids["SQL"]
        unlock_directly(client, sql)
        resume = create_resume(client, headers=other_user_headers)

        response = client.post(f"/api/resumes/{resume['id']}/skills/{sql}")

        assert response.status_code == 404

    def test_removal_is_scoped_to_one_resume(self, client, skill_ids):
        sql = skill_ids["SQL"]
        unlock_directly(client, sql, level=4)
        first = create_resume(client, title="A")
        second = create_resume(client, title="B")
        for resume in (first, second):
            client.post(f"/api/resumes/{resume['id']}/skills/{sql}")

        response = client.delete(f"/api/resumes/{first['id']}/skills/{sql}")

        assert response.status_code == 200
        assert resume_skill_names(client, first["id"]) == []
        assert resume_skill_names(client, second["id"]) == ["SQL"]
        ledger = client.get("/api/skills/user").json()
        assert [(s["skill_name"], s["level"]) for s in ledger] == [("SQL", 4)]

    def test_remove_missing_association(self, client, skill_ids):
        resume = create_resume(client)
        response = client.delete(f"/api/resumes/{resume['id']}/skills/{skill_ids['SQL']}")
        assert response.status_code == 404

    def test_deleted_user_skill_disappears_from_resume(self, client, skill_ids):
        sql, git = skill_ids["SQL"], skill_ids["Git"]
        unlock_directly(client, sql)
        unlock_directly(client, git)
        resume = create_resume(client)
        client.post(f"/api/resumes/{resume['id']}/skills/{sql}")
        client.post(f"/api/resumes/{resume['id']}/skills/{git}")

        client.delete(f"/api/skills/user/{sql}")

        assert resume_skill_names(client, resume["id"]) == ["Git"]

    def test_view_reflects_live_level(self, client, skill_ids):
        sql = skill_ids["SQL"]
        unlock_directly(client, sql, level=2)
        resume = create_resume(client)
        client.post(f"/api/resumes/{resume['id']}/skills/{sql}")

        unlock_directly(client, sql, level=7)

        skills = client.get(f"/api/resumes/{resume['id']}/skills").json()
        assert skills[0]["user_level"] == 7


class TestResumeBuilder:
    def test_build_from_skills(self, client, skill_ids):
        python, mentoring = skill_ids["Python"], skill_ids["Mentoring"]
        unlock_directly(client, python)

        response = client.post(
            "/api/resumes/from-skills",
            json={"title": "Generated", "skill_ids": [python, mentoring]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["resume"]["content"] == (
            "Skills:\n\n"
            "• Python (Hard Skill)\n  Python programming language\n\n"
            "• Mentoring (Soft Skill)\n  Mentoring and coaching others"
        )
        assert body["associated_skill_ids"] == [python]
        assert list(body["skipped"]) == [str(mentoring)]
        assert resume_skill_names(client, body["resume"]["id"]) == ["Python"]

    def test_build_requires_skills(self, client):
        response = client.post(
            "/api/resumes/from-skills", json={"title": "Generated", "skill_ids": []}
        )
        assert response.status_code == 400

    def test_append_skills(self, client, skill_ids):
        sql = skill_ids["SQL"]
        unlock_directly(client, sql)
        resume = create_resume(client, content="Experience")

        response = client.post(
            f"/api/resumes/{resume['id']}/append-skills", json={"skill_ids": [sql]}
        )

        assert response.status_code == 200
        assert response.json()["resume"]["content"] == (
            "Experience\n\nSkills:\n\n• SQL (Hard Skill)\n  SQL database language"
        )
        assert response.json()["associated_skill_ids"] == [sql]
