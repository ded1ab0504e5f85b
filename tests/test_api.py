"""
SnapEdit Backend: Action Endpoint Tests
==========================================

What:  End-to-end tests through FastAPI: identity header → route → service
       → SQLite, and error rendering by the global handlers.

What we test:
    ✅ Success envelope shape and camelCase wire names
    ✅ Missing identity → 401 UNAUTHORIZED
    ✅ Empty update → 400 BAD_REQUEST with field-level issues
    ✅ Foreign and missing ids → 404 NOT_FOUND with identical bodies
    ✅ The three walkthrough scenarios (project, screenshot, edit history)
    ✅ X-Request-ID echoed; /health reports the database
"""

from datetime import datetime

import pytest

ALICE = {"X-User-ID": "user-alice"}
BOB = {"X-User-ID": "user-bob"}


def _ts(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def _call(client, action, body=None, headers=ALICE):
    return await client.post(f"/_actions/{action}", json=body, headers=headers)


class TestProjectActions:

    @pytest.mark.asyncio
    async def test_project_scenario(self, test_client):
        response = await _call(test_client, "createProject", {"title": "Bug report"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        project = body["data"]["project"]
        assert project["ownerId"] == "user-alice"
        assert project["title"] == "Bug report"
        assert project["description"] is None
        assert "createdAt" in project and "updatedAt" in project

        response = await _call(
            test_client, "updateProject", {"id": project["id"], "sourceApp": "Chrome"}
        )
        assert response.status_code == 200
        updated = response.json()["data"]["project"]
        assert updated["id"] == project["id"]
        assert updated["title"] == "Bug report"
        assert updated["sourceApp"] == "Chrome"
        assert updated["createdAt"] == project["createdAt"]
        assert updated["updatedAt"] != project["updatedAt"]
        assert _ts(updated["updatedAt"]) > _ts(project["updatedAt"])

        listed = (await _call(test_client, "listProjects")).json()["data"]["items"][0]
        assert listed == updated

    @pytest.mark.asyncio
    async def test_owner_id_in_body_is_ignored(self, test_client):
        response = await _call(test_client, "createProject", {"ownerId": "user-bob"})
        assert response.json()["data"]["project"]["ownerId"] == "user-alice"

    @pytest.mark.asyncio
    async def test_missing_identity_is_unauthorized(self, test_client):
        response = await _call(test_client, "createProject", {}, headers={})
        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "UNAUTHORIZED"
        assert body["message"] == "You must be signed in to perform this action."

    @pytest.mark.asyncio
    async def test_empty_update_is_bad_request(self, test_client):
        created = (await _call(test_client, "createProject", {"title": "t"})).json()
        project_id = created["data"]["project"]["id"]

        response = await _call(test_client, "updateProject", {"id": project_id})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "BAD_REQUEST"
        issues = body["details"]["issues"]
        assert any("At least one field" in issue["msg"] for issue in issues)

    @pytest.mark.asyncio
    async def test_list_projects_without_body(self, test_client):
        await _call(test_client, "createProject", {"title": "mine"})
        await _call(test_client, "createProject", {"title": "theirs"}, headers=BOB)

        response = await test_client.post("/_actions/listProjects", headers=ALICE)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 1
        assert data["items"][0]["title"] == "mine"

    @pytest.mark.asyncio
    async def test_foreign_and_missing_look_the_same(self, test_client):
        bobs = (await _call(test_client, "createProject", {"title": "b"}, headers=BOB)).json()
        bobs_id = bobs["data"]["project"]["id"]

        foreign = await _call(test_client, "updateProject", {"id": bobs_id, "title": "x"})
        missing = await _call(test_client, "updateProject", {"id": "nope", "title": "x"})

        assert foreign.status_code == missing.status_code == 404
        strip = lambda b: {k: v for k, v in b.items() if k != "request_id"}  # noqa: E731
        assert strip(foreign.json()) == strip(missing.json())
        assert foreign.json()["error"] == "NOT_FOUND"


class TestScreenshotActions:

    @pytest.mark.asyncio
    async def test_screenshot_scenario(self, test_client):
        response = await _call(test_client, "createScreenshot", {"originalImageUrl": "img://1"})
        assert response.status_code == 200
        shot = response.json()["data"]["screenshot"]
        assert shot["projectId"] is None
        assert shot["originalImageUrl"] == "img://1"

        response = await _call(test_client, "listScreenshots", {"projectId": "nonexistent"})
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_original_image_url_is_bad_request(self, test_client):
        response = await _call(test_client, "createScreenshot", {"originalImageUrl": ""})
        assert response.status_code == 400
        assert response.json()["error"] == "BAD_REQUEST"

    @pytest.mark.asyncio
    async def test_dimensions_must_be_integers(self, test_client):
        response = await _call(
            test_client,
            "createScreenshot",
            {"originalImageUrl": "img://1", "width": "800", "height": True},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "BAD_REQUEST"
        fields = {issue["loc"][-1] for issue in body["details"]["issues"]}
        assert fields == {"width", "height"}

    @pytest.mark.asyncio
    async def test_create_under_foreign_project_not_found(self, test_client):
        bobs = (await _call(test_client, "createProject", {}, headers=BOB)).json()
        response = await _call(
            test_client,
            "createScreenshot",
            {"originalImageUrl": "img://1", "projectId": bobs["data"]["project"]["id"]},
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Project not found."

    @pytest.mark.asyncio
    async def test_update_and_filter_by_project(self, test_client):
        project = (await _call(test_client, "createProject", {"title": "p"})).json()
        project_id = project["data"]["project"]["id"]
        shot = (await _call(test_client, "createScreenshot", {"originalImageUrl": "img://1"})).json()
        shot_id = shot["data"]["screenshot"]["id"]

        response = await _call(
            test_client, "updateScreenshot",
            {"id": shot_id, "projectId": project_id, "width": 800, "height": 600},
        )
        assert response.status_code == 200
        updated = response.json()["data"]["screenshot"]
        assert updated["projectId"] == project_id
        assert updated["width"] == 800
        assert _ts(updated["updatedAt"]) > _ts(shot["data"]["screenshot"]["updatedAt"])

        listing = (await _call(test_client, "listScreenshots", {"projectId": project_id})).json()
        assert listing["data"]["total"] == 1
        assert listing["data"]["items"][0]["id"] == shot_id

    @pytest.mark.asyncio
    async def test_empty_screenshot_update_is_bad_request(self, test_client):
        response = await _call(test_client, "updateScreenshot", {"id": "whatever"})
        assert response.status_code == 400


class TestScreenshotEditActions:

    @pytest.mark.asyncio
    async def test_edit_history_scenario(self, test_client):
        shot = (await _call(test_client, "createScreenshot", {"originalImageUrl": "img://1"})).json()
        shot_id = shot["data"]["screenshot"]["id"]

        response = await _call(
            test_client, "createScreenshotEdit", {"screenshotId": shot_id, "editType": "crop"}
        )
        assert response.status_code == 200
        edit = response.json()["data"]["edit"]
        assert edit["editType"] == "crop"
        assert "updatedAt" not in edit

        response = await _call(test_client, "listScreenshotEdits", {"screenshotId": shot_id})
        data = response.json()["data"]
        assert data["total"] == 1
        assert len(data["items"]) == 1
        assert data["items"][0]["id"] == edit["id"]
        assert data["items"][0]["editType"] == "crop"
        assert data["items"][0]["ownerId"] == "user-alice"

    @pytest.mark.asyncio
    async def test_other_user_cannot_read_history(self, test_client):
        shot = (await _call(test_client, "createScreenshot", {"originalImageUrl": "img://1"})).json()
        shot_id = shot["data"]["screenshot"]["id"]
        await _call(test_client, "createScreenshotEdit", {"screenshotId": shot_id, "editType": "blur"})

        response = await _call(
            test_client, "listScreenshotEdits", {"screenshotId": shot_id}, headers=BOB
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_no_edit_mutation_routes(self, test_client):
        from snapedit.main import app

        paths = set(app.openapi()["paths"])
        assert "/_actions/createScreenshotEdit" in paths
        assert not any(
            "ScreenshotEdit" in path and not path.split("/")[-1].startswith(("create", "list"))
            for path in paths
        )


class TestCrossCutting:

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.post(
            "/_actions/listProjects", headers={**ALICE, "X-Request-ID": "abc12345"}
        )
        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.post(
            "/_actions/listProjects", headers={"X-Request-ID": "req-401"}
        )
        assert response.status_code == 401
        assert response.json()["request_id"] == "req-401"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
