"""
Tests for connector settings.
"""

import pytest
from pydantic import ValidationError

from filenet_connector.config import DEFAULT_API_URL, FileNetSettings

ENV_VARS = [
    "FILENET_NAMESPACE",
    "FILENET_API_URL",
    "FILENET_API_USERNAME",
    "FILENET_API_PASSWORD",
    "FILENET_API_DEBUGGING",
    "FILENET_API_TIMEOUT_SECONDS",
    "FILENET_SOURCE_SYSTEM",
    "FILENET_TECHNICAL_USER_ID",
    "FILENET_REAUTHORIZE_ATTRIBUTE",
    "FILENET_CALLER_ID_HEADER",
    "FILENET_REDACTED_FIELDS",
    "TEMPORAL_ENDPOINT",
    "TEMPORAL_TASK_QUEUE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without connector variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILENET_NAMESPACE", "pwf-documents")

        settings = FileNetSettings.from_env()

        assert settings.namespace == "pwf-documents"
        assert settings.base_url == DEFAULT_API_URL
        assert settings.debugging is False
        assert settings.request_timeout_seconds == 30.0
        assert settings.source_system == "PWF"
        assert settings.technical_user_id == "pwfadmin"
        assert settings.reauthorize_attribute == "reauthorize"
        assert settings.caller_id_header == "uid"
        assert settings.redacted_fields == ("data", "content")
        assert settings.temporal_endpoint == "temporal:7233"
        assert settings.task_queue == "filenet-documents-queue"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILENET_NAMESPACE", "pwf-documents")
        monkeypatch.setenv("FILENET_API_URL", "https://ecm.test")
        monkeypatch.setenv("FILENET_API_DEBUGGING", "true")
        monkeypatch.setenv("FILENET_API_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("FILENET_TECHNICAL_USER_ID", "svc")
        monkeypatch.setenv("FILENET_REDACTED_FIELDS", "data, ,payload")

        settings = FileNetSettings.from_env()

        assert settings.base_url == "https://ecm.test"
        assert settings.debugging is True
        assert settings.request_timeout_seconds == 5.0
        assert settings.technical_user_id == "svc"
        assert settings.redacted_fields == ("data", "payload")

    def test_namespace_argument_wins(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FILENET_NAMESPACE", "pwf-documents")
        assert FileNetSettings.from_env("archive").namespace == "archive"

    def test_namespace_is_required(self) -> None:
        with pytest.raises(ValidationError):
            FileNetSettings.from_env()


class TestValidation:
    @pytest.mark.parametrize("field", ["base_url", "technical_user_id"])
    def test_blank_settings_are_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            FileNetSettings(namespace="ns", **{field: "  "})

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FileNetSettings(namespace="ns", request_timeout_seconds=0)

    def test_password_is_not_in_repr(self) -> None:
        settings = FileNetSettings(namespace="ns", password="secret")
        assert "secret" not in repr(settings)
