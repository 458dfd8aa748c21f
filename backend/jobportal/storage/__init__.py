from jobportal.core.config import Settings
from jobportal.storage.base import BlobUploader
from jobportal.storage.local import LocalBlobUploader


def make_uploader(cfg: Settings) -> BlobUploader:
    """Build the uploader selected by ``UPLOAD_BACKEND``."""
    backend = cfg.UPLOAD_BACKEND.lower()
    if backend == "local":
        return LocalBlobUploader(cfg.UPLOAD_DIR, cfg.UPLOAD_BASE_URL)
    if backend == "s3":
        from jobportal.storage.s3 import S3BlobUploader

        if not cfg.S3_BUCKET:
            raise RuntimeError("S3_BUCKET is required for the s3 upload backend")
        return S3BlobUploader(
            bucket=cfg.S3_BUCKET,
            region=cfg.S3_REGION,
            endpoint_url=cfg.S3_ENDPOINT_URL,
            public_base_url=cfg.S3_PUBLIC_BASE_URL,
        )
    raise RuntimeError(f"Unknown UPLOAD_BACKEND: {cfg.UPLOAD_BACKEND}")


__all__ = ["BlobUploader", "LocalBlobUploader", "make_uploader"]
