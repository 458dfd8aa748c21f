import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from jobportal.core.exceptions import UploadFailure
from jobportal.storage.base import make_object_key

logger = logging.getLogger(__name__)


class S3BlobUploader:
    """Uploads to an S3-compatible bucket with public-read URLs."""

    def __init__(
        self,
        bucket: str,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        public_base_url: Optional[str] = None,
        client=None,
    ):
        self.bucket = bucket
        self.s3 = client or boto3.client("s3", region_name=region, endpoint_url=endpoint_url)
        if public_base_url:
            self.public_base_url = public_base_url.rstrip("/")
        elif endpoint_url:
            self.public_base_url = f"{endpoint_url.rstrip('/')}/{bucket}"
        else:
            self.public_base_url = f"https://{bucket}.s3.amazonaws.com"

    def upload(
        self,
        data: bytes,
        *,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str:
        key = make_object_key(filename, content_type)
        kwargs = {"Bucket": self.bucket, "Key": key, "Body": data}
        if content_type:
            kwargs["ContentType"] = content_type
        try:
            self.s3.put_object(**kwargs)
        except (BotoCoreError, ClientError) as exc:
            logger.error("S3 upload failed bucket=%s key=%s: %s", self.bucket, key, exc)
            raise UploadFailure() from exc
        logger.info("Stored upload bucket=%s key=%s size=%s", self.bucket, key, len(data))
        return f"{self.public_base_url}/{key}"
