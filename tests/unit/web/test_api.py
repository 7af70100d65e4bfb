"""Tests for the HTTP API against a stub application."""

from contextlib import asynccontextmanager
from datetime import timedelta
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from medcoders.core.modules.blog.models import BlogPost, PublishedBlogPost
from medcoders.core.modules.lead.models import Lead
from medcoders.core.modules.session.models import AuthToken
from medcoders.core.modules.upload.models import StoredUpload
from medcoders.core.modules.upload.validators import MAX_RESUME_SIZE, validate_resume
from medcoders.core.pagination import PaginationResult
from medcoders.errors import AuthenticationError, NotFoundError
from medcoders.web.server import create_fastapi_app

VALID_TOKEN = "valid-token"
LEAD_ID = UUID("11111111-2222-3333-4444-555555555555")


class StubApp:
    """Just enough of App for the routers under test."""

    def __init__(self, config):
        self.config = config
        self.session_max_age = timedelta(days=7)
        self.posts = [BlogPost(slug="modifier-59", title="Modifier 59", content="**Bold**", published=True)]
        self.leads = []
        self.received_sizes = []

    @asynccontextmanager
    async def lifespan(self):
        yield

    async def is_auth_token_valid(self, auth_token):
        return auth_token == VALID_TOKEN

    async def login(self, email, password):
        if password != "correct-password":
            raise AuthenticationError("Invalid email or password")
        return AuthToken(VALID_TOKEN)

    async def list_blog_posts(self, auth_token, published, limit, offset):
        return PaginationResult(items=self.posts, total=len(self.posts), limit=limit, offset=offset)

    async def get_published_blog_posts(self):
        return [PublishedBlogPost.from_domain(post) for post in self.posts]

    async def get_published_blog_post(self, slug):
        for post in self.posts:
            if post.slug == slug:
                return PublishedBlogPost.from_domain(post)
        raise NotFoundError("Blog post not found")

    async def submit_contact(self, submission):
        lead = Lead(id=LEAD_ID, **submission.model_dump(exclude={"phi_acknowledgment"}))
        self.leads.append(lead)
        return lead

    async def upload_resume(self, filename, content, content_type):
        self.received_sizes.append(len(content))
        validate_resume(filename, content_type, len(content))
        return StoredUpload(url=f"/uploads/resumes/1-abc.{filename.rsplit('.', 1)[1]}", filename="resumes/1-abc.pdf")


@pytest.fixture
def stub_app(config):
    return StubApp(config)


@pytest.fixture
def client(stub_app, config):
    with TestClient(create_fastapi_app(stub_app, config)) as test_client:  # type: ignore[arg-type]
        yield test_client


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestAuth:
    """Tests for login and protected endpoints."""

    def test_login_sets_cookie(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "admin@example.com", "password": "correct-password"})
        assert response.status_code == 200
        assert response.json() == {"token": VALID_TOKEN}
        cookie = response.headers["set-cookie"].lower()
        assert cookie.startswith(f"admin_session={VALID_TOKEN}")
        assert "httponly" in cookie
        assert "samesite=lax" in cookie
        assert "max-age=604800" in cookie
        assert "secure" not in cookie

    def test_login_wrong_password(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "admin@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password", "type": "authentication_error"}

    def test_logout_clears_cookie(self, client):
        response = client.post("/api/v1/auth/logout")
        assert response.status_code == 204
        assert 'admin_session=""' in response.headers["set-cookie"]

    def test_admin_requires_session(self, client):
        response = client.get("/api/v1/admin/blogs")
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    def test_admin_with_invalid_token(self, client):
        response = client.get("/api/v1/admin/blogs", headers={"Authorization": "Bearer forged"})
        assert response.status_code == 401

    def test_admin_with_bearer_token(self, client):
        response = client.get("/api/v1/admin/blogs", headers={"Authorization": f"Bearer {VALID_TOKEN}"})
        assert response.status_code == 200
        assert response.json()["total"] == 1

    def test_admin_with_cookie(self, client):
        client.cookies.set("admin_session", VALID_TOKEN)
        assert client.get("/api/v1/admin/blogs").status_code == 200

    def test_pagination_bounds(self, client):
        response = client.get("/api/v1/admin/blogs?limit=0", headers={"Authorization": f"Bearer {VALID_TOKEN}"})
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"


class TestResources:
    """Tests for the public blog endpoints."""

    def test_list(self, client):
        posts = client.get("/api/v1/resources").json()
        assert [post["slug"] for post in posts] == ["modifier-59"]
        assert posts[0]["html"] == "<p><strong>Bold</strong></p>"

    def test_missing_slug(self, client):
        response = client.get("/api/v1/resources/unknown")
        assert response.status_code == 404
        assert response.json() == {"message": "Blog post not found", "type": "not_found"}


class TestContact:
    """Tests for the contact form endpoint."""

    FORM = {
        "name": "Jane Doe",
        "email": "jane@clinic.example.com",
        "organization": "Clinic",
        "role": "Practice Manager",
        "services_needed": ["Surgical Coding"],
        "message": "Hello",
        "phi_acknowledgment": True,
    }

    def test_submit(self, client, stub_app):
        response = client.post("/api/v1/contact", json=self.FORM)
        assert response.status_code == 200
        assert response.json()["id"] == str(LEAD_ID)
        assert len(stub_app.leads) == 1

    def test_phi_not_acknowledged(self, client, stub_app):
        response = client.post("/api/v1/contact", json={**self.FORM, "phi_acknowledgment": False})
        assert response.status_code == 400
        assert response.json()["message"] == "phi_acknowledgment: PHI acknowledgment is required"
        assert stub_app.leads == []


class TestUploads:
    """Tests for file upload endpoints."""

    def test_resume_upload(self, client):
        response = client.post("/api/v1/uploads/resume", files={"file": ("cv.pdf", b"%PDF", "application/pdf")})
        assert response.status_code == 200
        assert response.json()["filename"] == "resumes/1-abc.pdf"

    def test_oversized_resume_read_is_capped(self, client, stub_app):
        """Test that an oversized body is rejected after reading one byte past the limit."""
        body = b"0" * (MAX_RESUME_SIZE + 4096)
        response = client.post("/api/v1/uploads/resume", files={"file": ("cv.pdf", body, "application/pdf")})
        assert response.status_code == 400
        assert response.json()["message"] == "File size exceeds 10MB limit"
        assert stub_app.received_sizes == [MAX_RESUME_SIZE + 1]

    def test_image_upload_requires_session(self, client):
        response = client.post("/api/v1/admin/upload", files={"file": ("a.png", b"png", "image/png")})
        assert response.status_code == 401


class TestOpenApi:
    """Tests for the generated OpenAPI document."""

    def test_public_endpoints_have_no_security(self, client):
        schema = client.get("/openapi.json").json()
        assert schema["paths"]["/api/v1/resources"]["get"]["security"] == []
        assert schema["paths"]["/uploads/{file_path}"]["get"]["security"] == []
        assert schema["security"] == [{"SessionCookie": []}, {"BearerAuth": []}]
        assert set(schema["components"]["securitySchemes"]) == {"SessionCookie", "BearerAuth"}
