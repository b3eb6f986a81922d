"""S3-compatible image storage (MinIO in deployment)."""
import logging
from typing import BinaryIO, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from flask import current_app

logger = logging.getLogger(__name__)

EXTENSION_KEY = "image_storage"
MISSING_BUCKET_CODES = ("404", "NoSuchBucket", "NotFound")


class ImageStorage:
    """Flask extension wrapping a boto3 S3 client bound to one bucket."""

    def __init__(self, app=None, client=None):
        self.client = client
        self.bucket = None
        self.public_base_url = ""
        self._bucket_ready = False
        if app is not None:
            self.init_app(app, client=client)

    def init_app(self, app, client=None):
        self.bucket = app.config.get("IMAGE_BUCKET", "images")
        self.public_base_url = (app.config.get("IMAGE_PUBLIC_BASE_URL") or "").rstrip("/")
        self.client = client or boto3.client(
            "s3",
            endpoint_url=app.config.get("S3_ENDPOINT"),
            region_name=app.config.get("S3_REGION"),
            aws_access_key_id=app.config.get("S3_ACCESS_KEY"),
            aws_secret_access_key=app.config.get("S3_SECRET_KEY"),
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        self._bucket_ready = False
        app.extensions[EXTENSION_KEY] = self

    def ensure_bucket(self) -> None:
        if self._bucket_ready:
            return
        try:
            self.client.head_bucket(Bucket=self.bucket)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") not in MISSING_BUCKET_CODES:
                raise
            logger.info("creating bucket %s", self.bucket)
            self.client.create_bucket(Bucket=self.bucket)
        self._bucket_ready = True

    def url(self, key: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{key}"

    def put_image(self, key: str, body: BinaryIO, content_type: Optional[str] = None) -> str:
        """Store ``body`` under ``key``; an existing object with that key is overwritten."""
        self.ensure_bucket()
        params = {"Bucket": self.bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        self.client.put_object(**params)
        logger.info("image stored: %s", key)
        return self.url(key)

    def list_urls(self) -> List[str]:
        self.ensure_bucket()
        urls = []
        kwargs = {"Bucket": self.bucket}
        while True:
            page = self.client.list_objects_v2(**kwargs)
            urls.extend(self.url(obj["Key"]) for obj in page.get("Contents", []))
            if not page.get("IsTruncated"):
                return urls
            kwargs["ContinuationToken"] = page["NextContinuationToken"]


def get_storage() -> ImageStorage:
    return current_app.extensions[EXTENSION_KEY]
