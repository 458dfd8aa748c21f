import mimetypes
import uuid
from pathlib import PurePosixPath
from typing import Optional, Protocol


class BlobUploader(Protocol):
    """
    Stores raw file bytes and returns a stable retrieval URL.

    Implementations raise ``UploadFailure`` on any error. The returned URL is
    opaque to callers. Flows upload before persisting anything, so a failed
    upload never leaves a partial account change, while a failed persist after
    a successful upload leaves the blob orphaned.
    """

    def upload(
        self,
        data: bytes,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str: ...


def make_object_key(filename: Optional[str], content_type: Optional[str]) -> str:
    """Generate a collision-free object key, keeping the file extension."""
    suffix = PurePosixPath(filename).suffix.lower() if filename else ""
    if not suffix and content_type:
        suffix = mimetypes.guess_extension(content_type) or ""
    return f"{uuid.uuid4().hex}{suffix}"
