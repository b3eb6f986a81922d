import os
import sys
import pytest
from botocore.exceptions import ClientError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from models import db


class FakeS3Client:
    """In-memory stand-in for the boto3 S3 client calls ImageStorage makes."""

    def __init__(self):
        self.buckets = {}
        self.fail_with = None

    def _check(self, operation):
        if self.fail_with:
            raise ClientError({"Error": {"Code": "500", "Message": self.fail_with}}, operation)

    def head_bucket(self, Bucket):
        self._check("HeadBucket")
        if Bucket not in self.buckets:
            raise ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadBucket")

    def create_bucket(self, Bucket):
        self.buckets.setdefault(Bucket, {})

    def put_object(self, Bucket, Key, Body, ContentType=None):
        self._check("PutObject")
        self.buckets[Bucket][Key] = Body.read()

    def list_objects_v2(self, Bucket, **kwargs):
        self._check("ListObjectsV2")
        keys = sorted(self.buckets[Bucket])
        return {"Contents": [{"Key": k} for k in keys], "IsTruncated": False}


@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    from app import create_app
    from app.config import TestingConfig
    return create_app(TestingConfig, storage_client=FakeS3Client())


@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture(scope='function')
def s3(app):
    storage = app.extensions["image_storage"]
    storage.client.buckets.clear()
    storage.client.fail_with = None
    storage._bucket_ready = False
    return storage.client
