"""
Tests for collaborator wiring and error responses.
"""

from unittest.mock import MagicMock, patch

import pytest

from dashboard.auth import LocalAuthProvider, SupabaseAuthProvider
from dashboard.exceptions import ConfigurationError, DocumentStoreError
from dashboard.media import CloudinaryObjectStore, LocalObjectStore
from dashboard.services import build_services
from dashboard.storage import SqlDocumentStore, SupabaseDocumentStore


LOCAL = {
    "AUTH_BACKEND": "local",
    "DOCUMENT_STORE_BACKEND": "sql",
    "OBJECT_STORE_BACKEND": "local",
    "UPLOAD_FOLDER": "/tmp/uploads",
}


class TestBuildServices:

    def test_local_backends(self):
        services = build_services(LOCAL)

        assert isinstance(services.auth, LocalAuthProvider)
        assert isinstance(services.documents, SqlDocumentStore)
        assert isinstance(services.media, LocalObjectStore)

    def test_hosted_backends_keep_auth_off_the_store_client(self):
        config = {
            "AUTH_BACKEND": "supabase",
            "DOCUMENT_STORE_BACKEND": "supabase",
            "OBJECT_STORE_BACKEND": "cloudinary",
            "SUPABASE_URL": "https://project.supabase.co",
            "SUPABASE_KEY": "anon-key",
            "CLOUDINARY_CLOUD_NAME": "demo",
            "CLOUDINARY_UPLOAD_PRESET": "preset",
            "SITE_URL": "https://dashboard.example.com/",
        }

        with patch("dashboard.services.create_client") as mock_create:
            mock_create.side_effect = lambda *args, **kwargs: MagicMock()
            services = build_services(config)
            assert mock_create.call_count == 1

            auth_client = services.auth.client_factory()

        assert isinstance(services.auth, SupabaseAuthProvider)
        assert services.auth.login_url == "https://dashboard.example.com/api/v1/auth/login"
        assert isinstance(services.documents, SupabaseDocumentStore)
        assert auth_client is not services.documents.client
        assert isinstance(services.media, CloudinaryObjectStore)

    def test_missing_supabase_settings(self):
        with pytest.raises(ConfigurationError):
            build_services(dict(LOCAL, AUTH_BACKEND="supabase"))

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="OBJECT_STORE_BACKEND"):
            build_services(dict(LOCAL, OBJECT_STORE_BACKEND="s3"))

    def test_injected_collaborators_win(self):
        documents = MagicMock()
        services = build_services(dict(LOCAL, DOCUMENT_STORE_BACKEND="nope"), documents=documents)
        assert services.documents is documents


class TestErrorResponses:

    def test_remote_failure_is_502_with_message(self, app, auth_client):
        failing = MagicMock()
        failing.select_all.side_effect = DocumentStoreError("relation \"blogs\" does not exist")
        app.extensions["dashboard"].documents = failing

        response = auth_client.get("/api/v1/blogs")

        assert response.status_code == 502
        assert response.get_json() == {
            "error": "DocumentStoreError",
            "message": "relation \"blogs\" does not exist",
        }
        assert failing.select_all.call_count == 1

    def test_unknown_route_is_json(self, client):
        response = client.get("/api/v1/nothing-here")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Not Found"
