"""S3 storage module for Kilat Storage operations."""

from .client import StorageClient
from .errors import ErrorKind, StorageError, UploadResult

__all__ = ["StorageClient", "ErrorKind", "StorageError", "UploadResult"]
