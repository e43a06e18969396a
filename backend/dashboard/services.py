"""
Collaborator container.

``init_services`` runs once inside ``create_app`` and builds the auth
provider, document store and object store from config. The document store
keeps one Supabase client on the project key; the auth provider builds its
own client per call. Views reach them through ``get_services()``; tests
pass their own instances to ``create_app``.
"""
from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app
from supabase import ClientOptions, create_client

from dashboard.auth import LocalAuthProvider, SupabaseAuthProvider
from dashboard.exceptions import ConfigurationError
from dashboard.media import CloudinaryObjectStore, LocalObjectStore, UploadTracker
from dashboard.storage import SqlDocumentStore, SupabaseDocumentStore

EXTENSION_KEY = "dashboard"


@dataclass
class Services:
    auth: Any
    documents: Any
    media: Any
    uploads: UploadTracker


def supabase_settings(config):
    url = config.get("SUPABASE_URL")
    key = config.get("SUPABASE_KEY")
    if not url or not key:
        raise ConfigurationError("SUPABASE_URL and SUPABASE_KEY must be set")
    return url, key


def create_supabase_client(config):
    url, key = supabase_settings(config)

    # Sessions live in the browser cookie, never in a client
    options = ClientOptions(persist_session=False, auto_refresh_token=False)
    return create_client(url, key, options=options)


def build_services(
    config,
    *,
    auth: Optional[Any] = None,
    documents: Optional[Any] = None,
    media: Optional[Any] = None,
    supabase_client: Optional[Any] = None,
) -> Services:
    client = supabase_client

    def supabase():
        nonlocal client
        if client is None:
            client = create_supabase_client(config)
        return client

    if auth is None:
        backend = config.get("AUTH_BACKEND")
        if backend == "supabase":
            supabase_settings(config)
            login_url = f"{config.get('SITE_URL', '').rstrip('/')}/api/v1/auth/login"
            auth = SupabaseAuthProvider(lambda: create_supabase_client(config), login_url=login_url)
        elif backend == "local":
            auth = LocalAuthProvider()
        else:
            raise ConfigurationError(f"Unknown AUTH_BACKEND: {backend!r}")

    if documents is None:
        backend = config.get("DOCUMENT_STORE_BACKEND")
        if backend == "supabase":
            documents = SupabaseDocumentStore(supabase())
        elif backend == "sql":
            documents = SqlDocumentStore()
        else:
            raise ConfigurationError(f"Unknown DOCUMENT_STORE_BACKEND: {backend!r}")

    if media is None:
        backend = config.get("OBJECT_STORE_BACKEND")
        if backend == "cloudinary":
            media = CloudinaryObjectStore(
                config.get("CLOUDINARY_CLOUD_NAME"),
                config.get("CLOUDINARY_UPLOAD_PRESET"),
                timeout=config.get("UPLOAD_TIMEOUT"),
            )
        elif backend == "local":
            media = LocalObjectStore(config.get("UPLOAD_FOLDER", "uploads"))
        else:
            raise ConfigurationError(f"Unknown OBJECT_STORE_BACKEND: {backend!r}")

    return Services(auth=auth, documents=documents, media=media, uploads=UploadTracker())


def init_services(app, **overrides) -> Services:
    services = build_services(app.config, **overrides)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
