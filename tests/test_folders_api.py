"""
Noteful API: Folder Endpoint Tests
====================================

What:  End-to-end tests of /folders against a real SQLite database.
How:   test_client (conftest.py) drives a fresh app over ASGITransport.
"""

import pytest

pytestmark = pytest.mark.asyncio

FOLDER_NOT_FOUND = {"error": {"message": "Folder doesn't exist"}}


class TestListFolders:

    async def test_empty_table_returns_empty_list(self, test_client):
        response = await test_client.get("/folders")

        assert response.status_code == 200
        assert response.json() == []

    async def test_returns_folders_in_insertion_order(self, test_client, make_folder):
        for name in ("Important", "Super", "Spangley"):
            await make_folder(name)

        response = await test_client.get("/folders")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "Important"},
            {"id": 2, "name": "Super"},
            {"id": 3, "name": "Spangley"},
        ]


class TestCreateFolder:

    async def test_creates_folder_with_location(self, test_client):
        response = await test_client.post("/folders", json={"name": "Test new folder"})

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Test new folder"}
        assert response.headers["location"] == "/folders/1"

        follow = await test_client.get(response.headers["location"])
        assert follow.status_code == 200
        assert follow.json() == response.json()

    async def test_missing_name_returns_400_and_creates_nothing(self, test_client, make_folder):
        await make_folder("Existing")

        response = await test_client.post("/folders", json={"title": "wrong field"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'name' in request body"}}
        assert len((await test_client.get("/folders")).json()) == 1

    async def test_null_and_blank_names_rejected(self, test_client):
        for body in ({"name": None}, {"name": "  "}, {}):
            response = await test_client.post("/folders", json=body)
            assert response.status_code == 400

    async def test_no_body_returns_400(self, test_client):
        response = await test_client.post("/folders")

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'name' in request body"}}

    async def test_extraneous_fields_ignored(self, test_client):
        response = await test_client.post(
            "/folders", json={"name": "Work", "id": 999, "owner": "someone"}
        )

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Work"}

    async def test_wrong_type_returns_400(self, test_client):
        response = await test_client.post("/folders", json={"name": ["not", "text"]})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'name' in request body"}}

    async def test_malformed_json_returns_400(self, test_client):
        response = await test_client.post(
            "/folders",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Request body must be valid JSON"}}


class TestGetFolder:

    async def test_returns_folder(self, test_client, make_folder):
        await make_folder("Important")
        await make_folder("Super")

        response = await test_client.get("/folders/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Super"}

    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.get("/folders/435")

        assert response.status_code == 404
        assert response.json() == FOLDER_NOT_FOUND

    async def test_non_integer_id_returns_400(self, test_client):
        response = await test_client.get("/folders/abc")

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid 'folder_id' in request path"}}


class TestDeleteFolder:

    async def test_deletes_folder(self, test_client, make_folder):
        await make_folder("Important")
        await make_folder("Super")

        response = await test_client.delete("/folders/2")

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/folders/2")).status_code == 404
        assert (await test_client.get("/folders")).json() == [{"id": 1, "name": "Important"}]

    async def test_unknown_id_returns_404(self, test_client):
        response = await test_client.delete("/folders/456")

        assert response.status_code == 404
        assert response.json() == FOLDER_NOT_FOUND


class TestOutOfRangeFolderId:

    @pytest.mark.parametrize("verb", ["get", "delete", "patch"])
    async def test_id_too_large_for_column_returns_404(self, test_client, verb):
        response = await test_client.request(verb, f"/folders/{2**63}", json={"name": "x"})

        assert response.status_code == 404
        assert response.json() == FOLDER_NOT_FOUND


class TestUpdateFolder:

    async def test_updates_name(self, test_client, make_folder):
        await make_folder("Important")
        await make_folder("Super")

        response = await test_client.patch("/folders/2", json={"name": "Updated Name"})

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/folders/2")).json() == {"id": 2, "name": "Updated Name"}

    async def test_no_recognized_field_returns_400_and_keeps_row(self, test_client, make_folder):
        await make_folder("Important")

        response = await test_client.patch("/folders/1", json={"irrelevantField": "foo"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Request body must contain a 'name'"}}
        assert (await test_client.get("/folders/1")).json() == {"id": 1, "name": "Important"}

    async def test_empty_name_counts_as_absent(self, test_client, make_folder):
        await make_folder("Important")

        response = await test_client.patch("/folders/1", json={"name": ""})

        assert response.status_code == 400

    async def test_whitespace_only_name_counts_as_absent(self, test_client, make_folder):
        await make_folder("Important")

        response = await test_client.patch("/folders/1", json={"name": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Request body must contain a 'name'"}}
        assert (await test_client.get("/folders/1")).json() == {"id": 1, "name": "Important"}

    async def test_extraneous_field_ignored(self, test_client, make_folder):
        await make_folder("Important")

        response = await test_client.patch(
            "/folders/1",
            json={"name": "updated Folder Title", "fieldToIgnore": "should not be in GET response"},
        )

        assert response.status_code == 204
        assert (await test_client.get("/folders/1")).json() == {
            "id": 1,
            "name": "updated Folder Title",
        }

    async def test_unknown_id_returns_404_before_body_checks(self, test_client):
        response = await test_client.patch("/folders/456")

        assert response.status_code == 404
        assert response.json() == FOLDER_NOT_FOUND


class TestFolderSanitization:

    async def test_script_escaped_on_every_read_path(self, test_client):
        malicious = '<script>alert("xss");</script>'
        escaped = "&lt;script&gt;alert(&#34;xss&#34;);&lt;/script&gt;"

        created = await test_client.post("/folders", json={"name": malicious})
        assert created.json()["name"] == escaped

        fetched = await test_client.get(f"/folders/{created.json()['id']}")
        assert fetched.json()["name"] == escaped

        listed = await test_client.get("/folders")
        assert listed.json()[0]["name"] == escaped
