"""Kilat Storage client: a thin facade over an S3-compatible boto3 client."""

from .s3 import StorageClient, StorageError, UploadResult

__all__ = ["StorageClient", "StorageError", "UploadResult"]
