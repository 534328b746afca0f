"""S3 client facade for Kilat Storage and other S3-compatible services."""

import boto3
import logging
from botocore.exceptions import BotoCoreError, ClientError
from typing import Any, Dict, Optional, Union

from kilatstorage.config.settings import Settings, StorageSettings, get_settings
from kilatstorage.s3.errors import StorageError, UploadResult

logger = logging.getLogger(__name__)


class StorageClient:
    """
    Pass-through client for bucket and object operations.

    Each method is a single call on the underlying boto3 client. Service
    errors propagate as ``botocore.exceptions.ClientError``, except for
    uploads, whose failures are returned in an ``UploadResult``.

    Example:
        ```python
        client = StorageClient(StorageSettings(credentials={"key": "...", "secret": "..."}))
        for bucket in client.list_buckets()["Buckets"]:
            print(bucket["Name"])

        client.put_object("marketplace", "assets/images/image1.jpg", "/tmp/image1.jpg")
        ```
    """

    def __init__(self, config: StorageSettings, client=None):
        self.config = config
        if client is None:
            logger.info(
                "Initializing S3 client for %s (region: %s)",
                config.endpoint,
                config.region,
            )
            client = boto3.client(
                "s3",
                region_name=config.region,
                api_version=config.api_version,
                endpoint_url=config.endpoint,
                aws_access_key_id=config.credentials.key,
                aws_secret_access_key=config.credentials.secret,
            )
        self._s3 = client

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StorageClient":
        """Build a client from application settings (loaded from the environment by default)."""
        settings = settings or get_settings()
        return cls(settings.storage)

    @property
    def handle(self):
        """The underlying boto3 S3 client."""
        return self._s3

    def list_buckets(self) -> Dict[str, Any]:
        """
        List buckets visible to the configured credentials.

        Returns:
            ListBuckets response; bucket names are under ``result["Buckets"][i]["Name"]``
        """
        logger.info("Listing buckets")
        return self._s3.list_buckets()

    def list_objects(self, bucket: str) -> Dict[str, Any]:
        """
        List objects in a bucket (single call, no pagination).

        Args:
            bucket: Bucket name

        Returns:
            ListObjects response; keys are under ``result["Contents"][i]["Key"]``
        """
        logger.info(f"Listing objects in bucket: {bucket}")
        return self._s3.list_objects(Bucket=bucket)

    def create_bucket(self, bucket: str) -> Dict[str, Any]:
        """
        Create a bucket. Naming rules and duplicates are enforced by the service.

        Args:
            bucket: New bucket name
        """
        logger.info(f"Creating bucket: {bucket}")
        return self._s3.create_bucket(Bucket=bucket)

    def delete_bucket(self, bucket: str) -> Dict[str, Any]:
        """
        Delete an empty bucket.

        Args:
            bucket: Bucket name
        """
        logger.info(f"Deleting bucket: {bucket}")
        return self._s3.delete_bucket(Bucket=bucket)

    def delete_object(self, bucket: str, key: Optional[str] = None) -> Dict[str, Any]:
        """
        Delete an object from a bucket.

        Args:
            bucket: Bucket name
            key: Object key. When omitted the access key from the credentials
                 is used as the object key.
        """
        if key is None:
            key = self.config.credentials.key
            logger.warning(
                "delete_object called without a key on bucket %s; "
                "using the access key as object key",
                bucket,
            )
        logger.info(f"Deleting object {key} from bucket: {bucket}")
        return self._s3.delete_object(Bucket=bucket, Key=key)

    def upload(self, bucket: str, key: str, source_file: str) -> UploadResult:
        """
        Upload a local file with the configured ACL.

        Args:
            bucket: Bucket name
            key: Destination object key, e.g. ``assets/images/image1.jpg``
            source_file: Local file path

        Returns:
            UploadResult with the response metadata, or the service or
            connection error

        Raises:
            OSError: If the local file cannot be opened
        """
        logger.info(f"Uploading {source_file} to {bucket}/{key} (acl: {self.config.acl.value})")
        with open(source_file, "rb") as body:
            try:
                response = self._s3.put_object(
                    Bucket=bucket,
                    Key=key,
                    Body=body,
                    ACL=self.config.acl.value,
                )
            except (ClientError, BotoCoreError) as e:
                error = StorageError.wrap(e, bucket=bucket, key=key)
                logger.warning(f"Upload of {bucket}/{key} failed: [{error.code}] {error.message}")
                return UploadResult(error=error)

        logger.info(f"Successfully uploaded {bucket}/{key}")
        return UploadResult(metadata=response.get("ResponseMetadata", {}))

    def put_object(self, bucket: str, key: str, source_file: str) -> Union[Dict[str, Any], str]:
        """
        Upload a local file; returns the response metadata, or the error
        message as a string on failure.
        """
        return self.upload(bucket, key, source_file).unwrap_or_message()
