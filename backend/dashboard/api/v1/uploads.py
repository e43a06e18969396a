from flask import g, jsonify, request

from dashboard.application.record_types import UPLOAD_FOLDERS
from dashboard.media import IMAGE, RESOURCE_KINDS
from dashboard.services import get_services
from dashboard.utils.decorators import login_required
from . import v1_bp


@v1_bp.route("/uploads", methods=["POST"])
@login_required
def upload_media():
    """
    Upload one file to the object store and return its URL.

    ``field`` names the form field the URL will replace; each field has its
    own pending flag while its upload is in flight.
    """
    file = request.files.get("file")
    if file is None or not file.filename:
        return jsonify({"error": "No file provided"}), 400

    resource_type = request.form.get("resource_type", IMAGE)
    if resource_type not in RESOURCE_KINDS:
        return jsonify({"error": f"Unsupported resource type: {resource_type}"}), 400

    folder = request.form.get("folder", "")
    if folder not in UPLOAD_FOLDERS:
        return jsonify({"error": f"Unknown upload folder: {folder}"}), 400

    field = request.form.get("field") or file.filename
    owner = g.current_session.user.id
    services = get_services()

    with services.uploads.track(owner, field):
        url = services.media.upload(file, resource_type, folder)

    return jsonify({"url": url, "field": field}), 201


@v1_bp.route("/uploads/pending", methods=["GET"])
@login_required
def pending_uploads():
    owner = g.current_session.user.id
    return jsonify({"pending": sorted(get_services().uploads.pending(owner))}), 200
