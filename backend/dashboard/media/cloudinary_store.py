import logging
from typing import Optional

import requests

from dashboard.exceptions import ConfigurationError, UploadError
from .base import RESOURCE_KINDS, VIDEO

logger = logging.getLogger(__name__)

CLOUDINARY_API = "https://api.cloudinary.com/v1_1"


class CloudinaryObjectStore:
    """
    Unsigned uploads to Cloudinary through an upload preset.

    Both ``cloud_name`` and ``upload_preset`` must be configured; otherwise
    every upload fails before touching the network.
    """

    def __init__(self, cloud_name: Optional[str], upload_preset: Optional[str], timeout: Optional[float] = None):
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.timeout = timeout

    def upload_url(self, resource_kind: str) -> str:
        return f"{CLOUDINARY_API}/{self.cloud_name}/{resource_kind}/upload"

    def upload(self, file, resource_kind: str, folder: str) -> str:
        if not self.cloud_name or not self.upload_preset:
            raise ConfigurationError(
                "Cloudinary configuration is missing. Please check your environment variables."
            )
        if resource_kind not in RESOURCE_KINDS:
            raise UploadError(f"Unsupported resource type: {resource_kind}")

        data = {"upload_preset": self.upload_preset, "folder": folder}
        if resource_kind == VIDEO:
            data["resource_type"] = VIDEO

        filename = getattr(file, "filename", None) or getattr(file, "name", None) or "upload"
        stream = getattr(file, "stream", file)

        try:
            response = requests.post(
                self.upload_url(resource_kind),
                data=data,
                files={"file": (filename, stream)},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error(f"Cloudinary upload error: {exc}")
            raise UploadError(f"Cloudinary upload failed: {exc}") from exc

        if not response.ok:
            logger.error(f"Cloudinary upload failed: {response.status_code}")
            raise UploadError(f"Cloudinary upload failed: {response.status_code} {response.text}")

        url = response.json().get("secure_url")
        if not url:
            raise UploadError("Cloudinary upload failed: response carried no secure_url")
        return url
