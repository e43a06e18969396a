import os
import uuid
from werkzeug.exceptions import BadRequest
from werkzeug.utils import secure_filename

from .base import IMAGE, VIDEO

ALLOWED_EXTENSIONS = {
    IMAGE: {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'},
    VIDEO: {'mp4', 'mov', 'avi', 'webm'},
}


def allowed_file(filename, resource_kind):
    extensions = ALLOWED_EXTENSIONS.get(resource_kind, set())
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in extensions


class LocalObjectStore:
    """Saves uploads under ``upload_folder`` and returns a ``/media/...`` URL."""

    def __init__(self, upload_folder, base_url="/media"):
        self.upload_folder = upload_folder
        self.base_url = base_url.rstrip('/')

    def upload(self, file, resource_kind, folder):
        filename = secure_filename(getattr(file, "filename", None) or "")
        if not filename or not allowed_file(filename, resource_kind):
            raise BadRequest("File type not allowed")

        ext = filename.rsplit('.', 1)[1].lower()
        unique_filename = f"{uuid.uuid4().hex}.{ext}"

        subfolder = secure_filename(folder) or "misc"
        target_dir = os.path.join(self.upload_folder, subfolder)
        os.makedirs(target_dir, exist_ok=True)

        file.save(os.path.join(target_dir, unique_filename))

        return f"{self.base_url}/{subfolder}/{unique_filename}"
