import os

from flask import Flask, send_from_directory
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .middleware.session_middleware import session_middleware
from .errors import register_error_handlers
from .services import init_services
from .utils.log import configure_logging


def create_app(config_name: str = "development", **overrides) -> Flask:
    """
    Application factory.

    ``overrides`` may carry ready-made collaborators (``auth``,
    ``documents``, ``media``, ``supabase_client``); anything not given is
    built from config.
    """
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    upload_folder = app.config["UPLOAD_FOLDER"]
    if not os.path.isabs(upload_folder):
        app.config["UPLOAD_FOLDER"] = os.path.join(app.instance_path, upload_folder)

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Collaborators (auth, documents, media)
    # -------------------------------------------------
    init_services(app, **overrides)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    session_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Locally stored media (LocalObjectStore)
    # -------------------------------------------------
    @app.route("/media/<path:filename>", methods=["GET"], endpoint="media_file")
    def serve_media(filename):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    app.logger.info(
        "Content dashboard ready "
        f"(auth={app.config['AUTH_BACKEND']}, "
        f"documents={app.config['DOCUMENT_STORE_BACKEND']}, "
        f"media={app.config['OBJECT_STORE_BACKEND']})"
    )
    return app
