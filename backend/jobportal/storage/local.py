import logging
from pathlib import Path
from typing import Optional

from jobportal.core.exceptions import UploadFailure
from jobportal.storage.base import make_object_key

logger = logging.getLogger(__name__)


class LocalBlobUploader:
    """Writes uploads to a local directory served under ``base_url``."""

    def __init__(self, root_dir: str, base_url: str):
        self.root = Path(root_dir).resolve()
        self.root.mkdir(parents=True, exist_ok=True)
        self.base_url = base_url.rstrip("/")

    def upload(
        self,
        data: bytes,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str:
        key = make_object_key(filename, content_type)
        path = self.root / key
        try:
            path.write_bytes(data)
        except OSError as exc:
            logger.error("Local upload failed for key=%s: %s", key, exc)
            raise UploadFailure() from exc
        logger.info("Stored upload key=%s size=%s", key, len(data))
        return f"{self.base_url}/{key}"
