"""
Error and result types for storage operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError, HTTPClientError
from botocore.exceptions import ConnectionError as BotoConnectionError


class ErrorKind(str, Enum):
    """Coarse classification of a service error."""
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    CONFLICT = "conflict"
    SERVICE = "service"


_NOT_FOUND_CODES = {"NoSuchBucket", "NoSuchKey", "NotFound", "404"}
_ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AllAccessDisabled",
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "403",
}
_CONFLICT_CODES = {"BucketAlreadyExists", "BucketAlreadyOwnedByYou", "BucketNotEmpty"}


def classify(code: Optional[str], status_code: Optional[int] = None) -> ErrorKind:
    """Map an S3 error code (falling back to HTTP status) onto an ErrorKind."""
    if code in _NOT_FOUND_CODES or status_code == 404:
        return ErrorKind.NOT_FOUND
    if code in _ACCESS_DENIED_CODES or status_code == 403:
        return ErrorKind.ACCESS_DENIED
    if code in _CONFLICT_CODES or status_code == 409:
        return ErrorKind.CONFLICT
    return ErrorKind.SERVICE


class StorageError(Exception):
    """Service error raised by the storage backend.

    ``str(error)`` is the bare service message, so callers that only want
    the text keep working.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        kind: ErrorKind = ErrorKind.SERVICE,
        status_code: Optional[int] = None,
        operation: Optional[str] = None,
        bucket: Optional[str] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.code = code or "StorageError"
        self.kind = kind
        self.status_code = status_code
        self.operation = operation
        self.bucket = bucket
        self.key = key
        super().__init__(message)

    @classmethod
    def from_client_error(
        cls, exc: ClientError, bucket: Optional[str] = None, key: Optional[str] = None
    ) -> "StorageError":
        error = exc.response.get("Error", {})
        metadata = exc.response.get("ResponseMetadata", {})
        code = error.get("Code")
        status_code = metadata.get("HTTPStatusCode")
        return cls(
            message=error.get("Message") or str(exc),
            code=code,
            kind=classify(code, status_code),
            status_code=status_code,
            operation=exc.operation_name,
            bucket=bucket,
            key=key,
        )

    @classmethod
    def from_botocore_error(
        cls, exc: BotoCoreError, bucket: Optional[str] = None, key: Optional[str] = None
    ) -> "StorageError":
        """Wrap a client-side failure (connection, timeout, SSL, validation)."""
        code = "NetworkError" if isinstance(exc, (BotoConnectionError, HTTPClientError)) else type(exc).__name__
        return cls(message=str(exc), code=code, bucket=bucket, key=key)

    @classmethod
    def wrap(
        cls,
        exc: Union[ClientError, BotoCoreError],
        bucket: Optional[str] = None,
        key: Optional[str] = None,
    ) -> "StorageError":
        if isinstance(exc, ClientError):
            return cls.from_client_error(exc, bucket=bucket, key=key)
        return cls.from_botocore_error(exc, bucket=bucket, key=key)

    def __repr__(self) -> str:
        location = ""
        if self.bucket and self.key:
            location = f", bucket={self.bucket!r}, key={self.key!r}"
        elif self.bucket:
            location = f", bucket={self.bucket!r}"
        return f"StorageError([{self.code}] {self.message!r}{location})"


@dataclass(frozen=True)
class UploadResult:
    """Outcome of an upload: response metadata on success, the error otherwise."""
    metadata: Optional[Dict[str, Any]] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_message(self) -> Union[Dict[str, Any], str]:
        if self.error is not None:
            return self.error.message
        return self.metadata


__all__ = ["ErrorKind", "StorageError", "UploadResult", "classify"]
