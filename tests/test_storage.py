from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from jobportal.core.config import Settings
from jobportal.core.exceptions import UploadFailure
from jobportal.storage import LocalBlobUploader, make_uploader
from jobportal.storage.base import make_object_key
from jobportal.storage.s3 import S3BlobUploader


def test_object_key_keeps_extension():
    assert make_object_key("Resume.PDF", None).endswith(".pdf")
    assert make_object_key(None, "image/png").endswith(".png")
    assert make_object_key("a.png", None) != make_object_key("a.png", None)


def test_local_upload_writes_file_and_returns_url(tmp_path):
    uploader = LocalBlobUploader(str(tmp_path), "http://files.test/uploads/")

    url = uploader.upload(b"hello", filename="photo.jpg")

    assert url.startswith("http://files.test/uploads/")
    key = url.rsplit("/", 1)[1]
    assert key.endswith(".jpg")
    assert (tmp_path / key).read_bytes() == b"hello"


def test_local_upload_failure(tmp_path):
    uploader = LocalBlobUploader(str(tmp_path), "http://files.test")
    uploader.root = tmp_path / "missing" / "dir"

    with pytest.raises(UploadFailure):
        uploader.upload(b"data")


def test_s3_upload_puts_object():
    client = MagicMock()
    uploader = S3BlobUploader("bucket-1", public_base_url="https://cdn.test", client=client)

    url = uploader.upload(b"%PDF", filename="cv.pdf", content_type="application/pdf")

    kwargs = client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "bucket-1"
    assert kwargs["Body"] == b"%PDF"
    assert kwargs["ContentType"] == "application/pdf"
    assert url == f"https://cdn.test/{kwargs['Key']}"


def test_s3_default_public_url():
    uploader = S3BlobUploader("bucket-1", client=MagicMock())
    assert uploader.upload(b"x").startswith("https://bucket-1.s3.amazonaws.com/")


def test_s3_client_error_is_upload_failure():
    client = MagicMock()
    client.put_object.side_effect = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "PutObject")
    uploader = S3BlobUploader("bucket-1", client=client)

    with pytest.raises(UploadFailure):
        uploader.upload(b"x")


def test_make_uploader_local(tmp_path):
    cfg = Settings(SECRET_KEY="k", UPLOAD_BACKEND="local", UPLOAD_DIR=str(tmp_path))
    assert isinstance(make_uploader(cfg), LocalBlobUploader)


def test_make_uploader_rejects_unknown_backend():
    with pytest.raises(RuntimeError):
        make_uploader(Settings(SECRET_KEY="k", UPLOAD_BACKEND="ftp"))


def test_make_uploader_s3_requires_bucket():
    with pytest.raises(RuntimeError):
        make_uploader(Settings(SECRET_KEY="k", UPLOAD_BACKEND="s3", S3_BUCKET=None))
