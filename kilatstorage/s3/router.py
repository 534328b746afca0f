"""FastAPI router for Kilat Storage bucket and object operations."""

import logging
import os
import shutil
import tempfile
from datetime import datetime
from functools import lru_cache
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from pydantic import BaseModel

from kilatstorage.s3.client import StorageClient
from kilatstorage.s3.errors import ErrorKind, StorageError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/s3", tags=["S3"])

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ACCESS_DENIED: 403,
    ErrorKind.CONFLICT: 409,
    ErrorKind.SERVICE: 502,
}


@lru_cache
def get_storage_client() -> StorageClient:
    return StorageClient.from_settings()


def _http_error(error: StorageError) -> HTTPException:
    logger.error(f"{error.operation or 'Storage'} failed: [{error.code}] {error.message}")
    return HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)


# =======================
# Request/Response Models
# =======================
class BucketList(BaseModel):
    """Buckets visible to the configured credentials."""
    buckets: List[str]
    count: int


class ObjectInfo(BaseModel):
    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None


class ObjectList(BaseModel):
    """Objects stored in a bucket."""
    bucket: str
    objects: List[ObjectInfo]
    count: int


class BucketCreateResponse(BaseModel):
    bucket: str
    location: Optional[str] = None


class BucketDeleteResponse(BaseModel):
    bucket: str
    deleted: bool


class ObjectDeleteResponse(BaseModel):
    bucket: str
    key: str
    deleted: bool


class UploadResponse(BaseModel):
    """Response after uploading an object."""
    bucket: str
    key: str
    request_id: Optional[str] = None
    status_code: Optional[int] = None


# =======================
# Bucket Endpoints
# =======================
@router.get("/buckets", response_model=BucketList)
async def list_buckets(client: StorageClient = Depends(get_storage_client)):
    """List all buckets."""
    try:
        result = client.list_buckets()
    except (ClientError, BotoCoreError) as e:
        raise _http_error(StorageError.wrap(e))
    names = [bucket["Name"] for bucket in result.get("Buckets", [])]
    return {"buckets": names, "count": len(names)}


@router.post("/buckets/{bucket}", response_model=BucketCreateResponse)
async def create_bucket(bucket: str, client: StorageClient = Depends(get_storage_client)):
    """Create a new bucket."""
    try:
        result = client.create_bucket(bucket)
    except (ClientError, BotoCoreError) as e:
        raise _http_error(StorageError.wrap(e, bucket=bucket))
    return {"bucket": bucket, "location": result.get("Location")}


@router.delete("/buckets/{bucket}", response_model=BucketDeleteResponse)
async def delete_bucket(bucket: str, client: StorageClient = Depends(get_storage_client)):
    """Delete an empty bucket."""
    try:
        client.delete_bucket(bucket)
    except (ClientError, BotoCoreError) as e:
        raise _http_error(StorageError.wrap(e, bucket=bucket))
    return {"bucket": bucket, "deleted": True}


# =======================
# Object Endpoints
# =======================
@router.get("/buckets/{bucket}/objects", response_model=ObjectList)
async def list_objects(bucket: str, client: StorageClient = Depends(get_storage_client)):
    """List objects in a bucket."""
    try:
        result = client.list_objects(bucket)
    except (ClientError, BotoCoreError) as e:
        raise _http_error(StorageError.wrap(e, bucket=bucket))
    objects = [
        {"key": obj["Key"], "size": obj.get("Size"), "last_modified": obj.get("LastModified")}
        for obj in result.get("Contents", [])
    ]
    return {"bucket": bucket, "objects": objects, "count": len(objects)}


@router.post("/buckets/{bucket}/objects", response_model=UploadResponse)
async def upload_object(
    bucket: str,
    key: str = Query(..., description="Destination object key"),
    file: UploadFile = File(..., description="File to upload"),
    client: StorageClient = Depends(get_storage_client),
):
    """
    Upload a file with the configured ACL.

    Args:
        bucket: Bucket name
        key: Object key/path
        file: File content
    """
    fd, path = tempfile.mkstemp(prefix="kilatstorage-")
    try:
        with os.fdopen(fd, "wb") as tmp:
            shutil.copyfileobj(file.file, tmp)
        result = client.upload(bucket, key, path)
    finally:
        os.unlink(path)

    if not result.ok:
        raise _http_error(result.error)
    return {
        "bucket": bucket,
        "key": key,
        "request_id": result.metadata.get("RequestId"),
        "status_code": result.metadata.get("HTTPStatusCode"),
    }


@router.delete("/buckets/{bucket}/objects", response_model=ObjectDeleteResponse)
async def delete_object(
    bucket: str,
    key: str = Query(..., description="Object key"),
    client: StorageClient = Depends(get_storage_client),
):
    """Delete an object."""
    try:
        client.delete_object(bucket, key)
    except (ClientError, BotoCoreError) as e:
        raise _http_error(StorageError.wrap(e, bucket=bucket, key=key))
    return {"bucket": bucket, "key": key, "deleted": True}


__all__ = ["router", "get_storage_client"]
