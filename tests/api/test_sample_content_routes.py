"""
Tests for the admin sample content API routes.
"""


class TestSampleContentAuthorization:
    def test_non_admin_forbidden(self, client, auth_headers):
        assert client.get("/api/admin/sample-content", headers=auth_headers).status_code == 403

    def test_missing_token_unauthorized(self, client):
        response = client.get("/api/admin/sample-content", headers={"X-User-Id": "admin-1"})

        assert response.status_code == 401


class TestListSampleContent:
    """Tests for GET /api/admin/sample-content."""

    def test_list_with_pagination(self, client, admin_headers):
        response = client.get("/api/admin/sample-content?page=2&limit=5", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["pagination"] == {"page": 2, "limit": 5, "total": 8, "total_pages": 2}
        assert len(data["data"]) == 3

    def test_list_filters(self, client, admin_headers):
        response = client.get(
            "/api/admin/sample-content",
            params={"content_type": "experience", "tags": "python,aws"},
            headers=admin_headers,
        )

        assert [s["id"] for s in response.json()["data"]] == ["exp-2"]

    def test_list_search(self, client, admin_headers):
        response = client.get(
            "/api/admin/sample-content",
            params={"search": "payments"},
            headers=admin_headers,
        )

        assert [s["id"] for s in response.json()["data"]] == ["proj-1"]

    def test_limit_out_of_range_returns_422(self, client, admin_headers):
        response = client.get("/api/admin/sample-content?limit=500", headers=admin_headers)

        assert response.status_code == 422

    def test_content_types(self, client, admin_headers):
        response = client.get("/api/admin/sample-content/content-types", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"] == ["experience", "personal_info", "projects", "skills", "summary"]


class TestSampleContentCrud:
    """Tests for create, read, update and delete."""

    def test_create_and_get(self, client, admin_headers):
        created = client.post(
            "/api/admin/sample-content",
            json={
                "content_type": "education",
                "content": {"school": "MIT", "degree": "BSc"},
                "target_industry": ["tech"],
                "experience_level": "entry",
            },
            headers=admin_headers,
        )

        assert created.status_code == 201
        sample = created.json()["data"]
        assert sample["is_active"] is True
        assert sample["experience_level"] == "entry"
        assert sample["created_by"] == "admin-1"

        fetched = client.get(f"/api/admin/sample-content/{sample['id']}", headers=admin_headers)
        assert fetched.status_code == 200
        assert fetched.json()["data"]["content"]["school"] == "MIT"

    def test_create_requires_content_type(self, client, admin_headers):
        response = client.post(
            "/api/admin/sample-content",
            json={"content": "x"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_create_rejects_unknown_experience_level(self, client, admin_headers):
        response = client.post(
            "/api/admin/sample-content",
            json={"content_type": "skills", "experience_level": "wizard"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_partial_update(self, client, admin_headers, repositories):
        response = client.patch(
            "/api/admin/sample-content/sum-1",
            json={"title": "Renamed"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        stored = repositories["samples"].samples["sum-1"]
        assert stored["title"] == "Renamed"
        assert stored["content"] == "Backend engineer focused on reliable APIs."

    def test_update_missing_returns_404(self, client, admin_headers):
        response = client.patch(
            "/api/admin/sample-content/missing",
            json={"title": "x"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_delete(self, client, admin_headers, repositories):
        response = client.delete("/api/admin/sample-content/exp-1", headers=admin_headers)

        assert response.status_code == 200
        assert "exp-1" not in repositories["samples"].samples
        assert client.delete("/api/admin/sample-content/exp-1", headers=admin_headers).status_code == 404

    def test_get_missing_returns_404(self, client, admin_headers):
        assert client.get("/api/admin/sample-content/missing", headers=admin_headers).status_code == 404


class TestTemplatePreviewSamples:
    """Tests for POST /api/admin/sample-content/template-preview."""

    def test_grouped_by_content_type(self, client, admin_headers):
        response = client.post(
            "/api/admin/sample-content/template-preview",
            json={"target_industry": "tech", "content_types": ["summary", "skills"]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {"summary", "skills"}
        assert [s["id"] for s in data["summary"]] == ["sum-1"]
