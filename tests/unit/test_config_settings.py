"""Unit tests for application settings configuration."""

from pathlib import Path

from storefront.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_service_defaults():
    settings = Settings(_env_file=None)
    assert settings.product_service_port == 3001
    assert settings.user_service_port == 3002
    assert settings.gateway_timeout == 10.0
    assert settings.health_check_interval == 30.0
    assert settings.partial_update_mode == "truthy"


def test_update_mode_from_environment(monkeypatch):
    monkeypatch.setenv("PARTIAL_UPDATE_MODE", "present")
    assert Settings(_env_file=None).partial_update_mode == "present"
