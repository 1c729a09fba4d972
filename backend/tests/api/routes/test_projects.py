"""Tests for Projects API routes."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from schema_designer.api.deps import get_db
from schema_designer.api.errors import register_exception_handlers
from schema_designer.api.routes.projects import router


@pytest.fixture
def app(db_session):
    """Create FastAPI app with projects router."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    return app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


BLOG = {
    "name": "Blog",
    "schema": {"posts": {"title": "string"}},
    "schemaType": "mongodb",
    "conversation": [
        {"role": "user", "content": "I need a blog"},
        {"role": "assistant", "content": "Who writes posts?"},
    ],
}


@pytest.mark.api
class TestProjectsAPI:
    """Test cases for Projects API."""

    async def test_create_project(self, client: AsyncClient):
        """Test creating a new project returns only its id."""
        response = await client.post("/api/projects", json=BLOG)

        assert response.status_code == 201
        data = response.json()
        assert list(data) == ["id"]
        assert len(data["id"]) == 36

    async def test_create_project_invalid_body(self, client: AsyncClient):
        """Test that a body without schemaType is rejected."""
        response = await client.post("/api/projects", json={"name": "Blog"})
        assert response.status_code == 422

    async def test_get_project(self, client: AsyncClient):
        """Test getting a project by ID."""
        create_resp = await client.post("/api/projects", json=BLOG)
        project_id = create_resp.json()["id"]

        response = await client.get(f"/api/projects/{project_id}")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "id",
            "name",
            "schema",
            "schemaType",
            "conversation",
            "createdAt",
            "updatedAt",
        }
        assert data["id"] == project_id
        assert data["name"] == BLOG["name"]
        assert data["schema"] == BLOG["schema"]
        assert data["schemaType"] == BLOG["schemaType"]
        assert data["conversation"] == BLOG["conversation"]
        assert data["createdAt"]
        assert data["createdAt"] == data["updatedAt"]

    async def test_get_sample_project(self, client: AsyncClient, sample_project):
        """Test reading a project stored outside the API."""
        response = await client.get(f"/api/projects/{sample_project.id}")

        assert response.status_code == 200
        assert response.json()["schema"] == {"collections": ["posts"]}

    async def test_conversation_extra_keys_round_trip(self, client: AsyncClient):
        """Test that client-side turn keys come back exactly as saved."""
        conversation = [
            {"role": "user", "content": "hi", "timestamp": "2024-01-01T00:00:00Z", "id": "m1"},
            {"role": "assistant", "content": "Hello", "id": "m2", "meta": {"liked": True}},
        ]
        create_resp = await client.post(
            "/api/projects", json={**BLOG, "conversation": conversation}
        )

        response = await client.get(f"/api/projects/{create_resp.json()['id']}")

        assert response.status_code == 200
        assert response.json()["conversation"] == conversation

    async def test_timestamps_carry_utc_offset(self, client: AsyncClient, sample_project):
        """Test that timestamps read back from the store are marked as UTC."""
        response = await client.get(f"/api/projects/{sample_project.id}")

        data = response.json()
        assert data["createdAt"].endswith(("Z", "+00:00"))
        assert data["updatedAt"].endswith(("Z", "+00:00"))

    async def test_get_project_not_found(self, client: AsyncClient):
        """Test getting a non-existent project."""
        response = await client.get("/api/projects/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}

    async def test_update_project(self, client: AsyncClient):
        """Test updating name and schema."""
        create_resp = await client.post("/api/projects", json=BLOG)
        project_id = create_resp.json()["id"]

        response = await client.put(
            f"/api/projects/{project_id}", json={"name": "Blog2", "schema": {"x": 1}}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}

        data = (await client.get(f"/api/projects/{project_id}")).json()
        assert data["name"] == "Blog2"
        assert data["schema"] == {"x": 1}

    async def test_update_ignores_schema_type_and_conversation(self, client: AsyncClient):
        """Test that schemaType and conversation survive an update untouched."""
        create_resp = await client.post("/api/projects", json=BLOG)
        project_id = create_resp.json()["id"]
        before = (await client.get(f"/api/projects/{project_id}")).json()

        await client.put(
            f"/api/projects/{project_id}",
            json={"name": "Blog2", "schema": {}, "schemaType": "sql", "conversation": []},
        )

        after = (await client.get(f"/api/projects/{project_id}")).json()
        assert after["schemaType"] == before["schemaType"] == "mongodb"
        assert after["conversation"] == before["conversation"]
        assert after["createdAt"] == before["createdAt"]

    async def test_update_project_not_found(self, client: AsyncClient):
        """Test that updating a non-existent project does not create it."""
        response = await client.put("/api/projects/nonexistent", json={"name": "x", "schema": {}})

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}

        assert (await client.get("/api/projects/nonexistent")).status_code == 404

    async def test_no_delete_route(self, client: AsyncClient):
        """Test that projects cannot be deleted."""
        create_resp = await client.post("/api/projects", json=BLOG)
        project_id = create_resp.json()["id"]

        response = await client.delete(f"/api/projects/{project_id}")

        assert response.status_code == 405
        assert (await client.get(f"/api/projects/{project_id}")).status_code == 200


@pytest.mark.api
class TestProjectsStoreUnavailable:
    """Test the store guard when no database is connected."""

    async def test_routes_fail_without_database(self):
        """Test that every project route reports the missing store."""
        app = FastAPI()
        register_exception_handlers(app)
        app.include_router(router, prefix="/api")
        app.state.database = None

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            responses = [
                await client.get("/api/projects/abc"),
                await client.post("/api/projects", json=BLOG),
                await client.put("/api/projects/abc", json={"name": "x", "schema": {}}),
            ]

        for response in responses:
            assert response.status_code == 500
            assert response.json() == {"error": "Database connection not available"}
