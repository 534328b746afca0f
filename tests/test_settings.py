import pytest
from pydantic import ValidationError

from kilatstorage.config.settings import ACL, Settings, StorageSettings


def test_defaults(storage_settings):
    assert storage_settings.version == "latest"
    assert storage_settings.region == "id-jkt-1"
    assert storage_settings.acl is ACL.PUBLIC_READ
    assert storage_settings.endpoint == "https://s3-id-jkt-1.kilatstorage.id/"
    assert storage_settings.api_version is None


def test_pinned_api_version():
    config = StorageSettings(version="2006-03-01", credentials={"key": "k", "secret": "s"})
    assert config.api_version == "2006-03-01"


@pytest.mark.parametrize("acl", [a.value for a in ACL])
def test_accepts_every_canned_acl(acl):
    config = StorageSettings(acl=acl, credentials={"key": "k", "secret": "s"})
    assert config.acl.value == acl


def test_rejects_unknown_acl():
    with pytest.raises(ValidationError):
        StorageSettings(acl="world-writable", credentials={"key": "k", "secret": "s"})


def test_credentials_required():
    with pytest.raises(ValidationError):
        StorageSettings()
    with pytest.raises(ValidationError):
        StorageSettings(credentials={"key": "", "secret": "s"})


def test_settings_are_frozen(storage_settings):
    with pytest.raises(ValidationError):
        storage_settings.region = "us-east-1"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("KILATSTORAGE_STORAGE__CREDENTIALS__KEY", "env-key")
    monkeypatch.setenv("KILATSTORAGE_STORAGE__CREDENTIALS__SECRET", "env-secret")
    monkeypatch.setenv("KILATSTORAGE_STORAGE__ACL", "private")
    monkeypatch.setenv("KILATSTORAGE_LOGGING__LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.storage.credentials.key == "env-key"
    assert settings.storage.credentials.secret == "env-secret"
    assert settings.storage.acl is ACL.PRIVATE
    assert settings.storage.region == "id-jkt-1"
    assert settings.logging.level == "DEBUG"
