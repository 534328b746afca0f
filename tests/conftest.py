import pytest
from botocore.stub import Stubber

from kilatstorage.config.settings import Settings, StorageSettings
from kilatstorage.s3.client import StorageClient


@pytest.fixture
def storage_settings():
    return StorageSettings(credentials={"key": "kilatstorage-key", "secret": "kilatstorage-secret"})


@pytest.fixture
def settings(storage_settings):
    return Settings(_env_file=None, storage=storage_settings)


@pytest.fixture
def client(storage_settings):
    return StorageClient(storage_settings)


@pytest.fixture
def stubber(client):
    with Stubber(client.handle) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "x.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0 not really a jpeg")
    return str(path)
