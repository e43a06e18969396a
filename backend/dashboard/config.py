import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI", "sqlite:///dashboard.db")

    # Collaborator backends
    AUTH_BACKEND = os.getenv("AUTH_BACKEND", "supabase")
    DOCUMENT_STORE_BACKEND = os.getenv("DOCUMENT_STORE_BACKEND", "supabase")
    OBJECT_STORE_BACKEND = os.getenv("OBJECT_STORE_BACKEND", "cloudinary")

    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY")

    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_UPLOAD_PRESET = os.getenv("CLOUDINARY_UPLOAD_PRESET")
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    # None leaves the HTTP client's default in place
    UPLOAD_TIMEOUT = float(os.getenv("UPLOAD_TIMEOUT")) if os.getenv("UPLOAD_TIMEOUT") else None

    SITE_URL = os.getenv("SITE_URL", "http://localhost:5000")
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
    RECENT_DAYS = int(os.getenv("RECENT_DAYS", 7))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///dashboard-dev.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = True

class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    AUTH_BACKEND = "local"
    DOCUMENT_STORE_BACKEND = "sql"
    OBJECT_STORE_BACKEND = "local"
    CLOUDINARY_CLOUD_NAME = None
    CLOUDINARY_UPLOAD_PRESET = None
    SITE_URL = "http://localhost"
    LOG_LEVEL = "WARNING"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
