"""Tests for client configuration, settings loading and the builder."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from unifi_network.api import UnifiClient, UnifiClientBuilder, ValidationError
from unifi_network.config import (
    ClientConfig,
    ConfigurationError,
    UnifiSettings,
    load_config,
)

BASE_URL = "https://192.168.1.1/proxy/network/integration"


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from UNIFI_* variables, CONFIG_PATH and any .env file."""
    import os

    for key in list(os.environ):
        if key.startswith("UNIFI_"):
            monkeypatch.delenv(key)
    # load_config() writes these directly; set-then-delete registers them for restore
    for key in ("CONFIG_PATH", "UNIFI_API_KEY", "UNIFI_BASE_URL"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestBuilder:
    """Tests for UnifiClientBuilder validation."""

    def test_valid_configuration_builds(self):
        """Test a complete configuration builds a client."""
        client = UnifiClientBuilder(BASE_URL).api_key("key").verify_ssl(False).build()
        try:
            assert isinstance(client, UnifiClient)
            assert client.config.base_url == BASE_URL
            assert client.config.verify_ssl is False
            assert client.config.timeout == 30.0
        finally:
            client.close()

    def test_verify_ssl_defaults_true(self):
        config = UnifiClientBuilder(BASE_URL).api_key("key").build_config()
        assert config.verify_ssl is True

    def test_trailing_slash_stripped(self):
        config = UnifiClientBuilder(BASE_URL + "/").api_key("key").build_config()
        assert config.base_url == BASE_URL

    def test_missing_api_key(self):
        """Test building without an API key raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            UnifiClientBuilder(BASE_URL).build()
        assert exc_info.value.field == "api_key"

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_empty_api_key(self, api_key):
        """Test an empty API key is rejected at construction."""
        with pytest.raises(ValidationError) as exc_info:
            UnifiClientBuilder(BASE_URL).api_key(api_key).build()
        assert exc_info.value.field == "api_key"
        assert "API key cannot be empty" in exc_info.value.message

    @pytest.mark.parametrize(
        "base_url",
        ["", "not a url", "192.168.1.1/proxy/network", "ftp://192.168.1.1", "https://"],
    )
    def test_malformed_base_url(self, base_url):
        """Test relative, non-HTTP and empty base URLs are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            UnifiClientBuilder(base_url).api_key("key").build()
        assert exc_info.value.field == "base_url"

    def test_non_positive_timeout(self):
        with pytest.raises(ValidationError) as exc_info:
            UnifiClientBuilder(BASE_URL).api_key("key").timeout(0).build()
        assert exc_info.value.field == "timeout"

    @pytest.mark.parametrize("page_size", [0, 201])
    def test_page_size_range(self, page_size):
        with pytest.raises(ValidationError):
            UnifiClientBuilder(BASE_URL).api_key("key").page_size(page_size).build()


class TestClientConfig:
    """Tests for ClientConfig immutability and secrecy."""

    def test_frozen(self):
        config = ClientConfig(base_url=BASE_URL, api_key="key")
        with pytest.raises(PydanticValidationError):
            config.api_key = "other"

    def test_api_key_hidden_from_repr(self):
        config = ClientConfig(base_url=BASE_URL, api_key="super-secret-key")
        assert "super-secret-key" not in repr(config)

    def test_unknown_fields_rejected(self):
        with pytest.raises(PydanticValidationError):
            ClientConfig(base_url=BASE_URL, api_key="key", username="admin")


class TestUnifiSettings:
    """Tests for environment and YAML settings sources."""

    def test_from_environment(self, clean_env):
        clean_env.setenv("UNIFI_BASE_URL", BASE_URL)
        clean_env.setenv("UNIFI_API_KEY", "env-key")
        clean_env.setenv("UNIFI_VERIFY_SSL", "false")
        clean_env.setenv("UNIFI_PAGE_SIZE", "50")

        settings = UnifiSettings()

        assert settings.verify_ssl is False
        assert settings.page_size == 50
        config = settings.to_client_config()
        assert config.api_key == "env-key"
        assert config.base_url == BASE_URL

    def test_yaml_file(self, clean_env, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            f"base_url: {BASE_URL}\napi_key: yaml-key\ntimeout: 5\nlog_level: warn\n"
        )
        clean_env.setenv("CONFIG_PATH", str(config_file))

        settings = UnifiSettings()

        assert settings.api_key == "yaml-key"
        assert settings.timeout == 5
        assert settings.log_level == "WARNING"

    def test_environment_overrides_yaml(self, clean_env, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(f"base_url: {BASE_URL}\napi_key: yaml-key\n")
        clean_env.setenv("CONFIG_PATH", str(config_file))
        clean_env.setenv("UNIFI_API_KEY", "env-key")

        assert UnifiSettings().api_key == "env-key"

    def test_client_from_settings(self, clean_env):
        settings = UnifiSettings(base_url=BASE_URL, api_key="key", page_size=10)
        client = UnifiClient.from_settings(settings)
        try:
            assert client.page_size == 10
        finally:
            client.close()


class TestLoadConfig:
    """Tests for load_config()."""

    def test_docker_secret_file(self, clean_env, tmp_path):
        secret = tmp_path / "api_key"
        secret.write_text("secret-from-file\n")
        clean_env.setenv("UNIFI_BASE_URL", BASE_URL)
        clean_env.setenv("UNIFI_API_KEY_FILE", str(secret))

        settings = load_config()

        assert settings.api_key == "secret-from-file"

    def test_missing_required_values(self, clean_env):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        joined = "\n".join(exc_info.value.errors)
        assert "'base_url' is required" in joined
        assert "'api_key' is required" in joined

    def test_missing_config_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(tmp_path / "missing.yaml"))
        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, clean_env, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("base_url: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(config_file))
        assert "Invalid YAML" in str(exc_info.value)

    def test_invalid_value_reported(self, clean_env):
        clean_env.setenv("UNIFI_BASE_URL", "not-a-url")
        clean_env.setenv("UNIFI_API_KEY", "key")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert "'base_url'" in exc_info.value.errors[0]
        assert "not-a-url" in exc_info.value.errors[0]
