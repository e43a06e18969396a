"""
Shared Test Fixtures for the Content Dashboard

The application is built with TestingConfig: SQLite in memory, the local
auth provider and the SQL document store. Uploads go to an in-memory fake so
no test touches the network or the disk.
"""

import pytest

from dashboard import create_app
from dashboard.auth import LocalAuthProvider
from dashboard.extensions import db
from dashboard.storage import SqlDocumentStore


# =============================================================================
# Fakes
# =============================================================================

class FakeObjectStore:
    """
    Object store double that records uploads and returns predictable URLs.

    Set ``hook`` to run code while an upload is "in flight".
    """

    def __init__(self):
        self.uploads = []
        self.hook = None

    def upload(self, file, resource_kind, folder):
        if self.hook is not None:
            self.hook()
        self.uploads.append((file.filename, resource_kind, folder))
        return f"https://cdn.test/{folder}/{file.filename}"


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def fake_media():
    return FakeObjectStore()


@pytest.fixture
def app(fake_media):
    """Testing app with a fresh in-memory database."""
    app = create_app("testing", media=fake_media)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    """SqlDocumentStore bound to an active app context."""
    with app.app_context():
        yield SqlDocumentStore()


# =============================================================================
# Auth Fixtures
# =============================================================================

USER_EMAIL = "editor@example.com"
USER_PASSWORD = "Secret123"


@pytest.fixture
def registered_user(app):
    with app.app_context():
        return LocalAuthProvider().sign_up(
            USER_EMAIL,
            USER_PASSWORD,
            {"first_name": "Ada", "last_name": "Lovelace", "full_name": "Ada Lovelace"},
        )


@pytest.fixture
def auth_client(client, registered_user):
    """Test client holding a signed-in session cookie."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": USER_EMAIL, "password": USER_PASSWORD},
    )
    assert response.status_code == 200
    return client


# =============================================================================
# Payload Factories
# =============================================================================

def _seo():
    return {
        "title": "Landing page",
        "description": "A landing page",
        "keywords": "landing, marketing",
        "metaRobots": "index, follow",
        "metaViewport": "width=device-width, initial-scale=1",
        "canonicalURL": "https://example.com/landing",
        "openGraph": {
            "title": "Landing page",
            "description": "A landing page",
            "url": "https://example.com/landing",
            "type": "website",
            "image": "https://cdn.example.com/og.png",
        },
    }


def _banner():
    return {
        "title": "Hero",
        "description": "Hero banner",
        "videoUrl": "https://cdn.example.com/hero.mp4",
        "poster": "https://cdn.example.com/poster.png",
    }


@pytest.fixture
def blog_payload():
    """Factory for a valid blog submission."""
    def make(title="Hello world", tags=("python",)):
        return {
            "seo": _seo(),
            "banner": _banner(),
            "content": {
                "title": title,
                "thumbImage": "https://cdn.example.com/thumb.png",
                "createdDate": "2024-05-01",
                "cta": {"slug": "contact", "text": "Get in touch"},
                "description": [{"text": "First paragraph"}],
                "tags": {"text": "Tags", "list": [{"text": t} for t in tags]},
                "urls": {"text": "Urls", "list": [{"text": "Docs", "href": "https://docs.example.com"}]},
            },
        }
    return make


@pytest.fixture
def seo_banner_payload():
    def make(title="Landing page"):
        payload = {"seo": _seo(), "banner": _banner()}
        payload["seo"]["title"] = title
        return payload
    return make


@pytest.fixture
def portfolio_payload():
    """Factory for a valid image-gallery portfolio carrying scratch data in the other variants."""
    def make(key="imageGallery"):
        return {
            "seo": _seo(),
            "banner": _banner(),
            "key": key,
            "content": {
                "card": {
                    "cardTitle": "Case study",
                    "ctaText": "Read more",
                    "pageUrl": "case-study",
                    "cardBackgroundImage": "https://cdn.example.com/card.png",
                },
                "imageGallery": [{"image": "https://cdn.example.com/1.png", "alt": "First"}],
                "videoGallery": [{"video": "https://cdn.example.com/1.mp4", "poster": ""}],
                "imageVideoTabsGallery": [
                    {"tabTitle": "", "key": "video", "list": [{"video": "https://cdn.example.com/2.mp4", "poster": ""}]},
                ],
            },
        }
    return make
