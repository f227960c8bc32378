"""Tests for gity.global_config module."""

import pytest
import yaml

from gity import global_config
from gity.global_config import GlobalConfigError


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".gity"
    mocker.patch("gity.global_config._CONFIG_DIR", config_dir)
    return config_dir


class TestLoadGlobalConfig:
    """Tests for load_global_config."""

    def test_missing_file_returns_empty(self, config_dir):
        """Test that a missing config file yields an empty dict."""
        assert global_config.load_global_config() == {}
        assert not global_config.is_configured()

    def test_loads_yaml(self, config_dir):
        """Test loading values from config.yaml."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("provider: anthropic\nmax_tokens: 80\n")

        config = global_config.load_global_config()

        assert config == {"provider": "anthropic", "max_tokens": 80}
        assert global_config.is_configured()

    def test_empty_file_returns_empty(self, config_dir):
        """Test that an empty file yields an empty dict."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("")

        assert global_config.load_global_config() == {}

    def test_invalid_yaml_raises(self, config_dir):
        """Test that malformed YAML raises GlobalConfigError."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("provider: [unclosed\n")

        with pytest.raises(GlobalConfigError):
            global_config.load_global_config()

    def test_non_mapping_raises(self, config_dir):
        """Test that a YAML list is rejected."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("- openai\n- anthropic\n")

        with pytest.raises(GlobalConfigError) as exc_info:
            global_config.load_global_config()

        assert "mapping" in str(exc_info.value)


class TestSaveGlobalConfig:
    """Tests for save_global_config and set_value."""

    def test_creates_directory_and_file(self, config_dir):
        """Test that saving creates ~/.gity/config.yaml."""
        global_config.save_global_config({"provider": "openai"})

        content = yaml.safe_load((config_dir / "config.yaml").read_text())
        assert content == {"provider": "openai"}

    def test_set_value_preserves_other_keys(self, config_dir):
        """Test that set_value updates a single key."""
        global_config.save_global_config({"provider": "openai", "model": "gpt-4o"})

        global_config.set_value("max_tokens", 120)

        assert global_config.load_global_config() == {
            "provider": "openai",
            "model": "gpt-4o",
            "max_tokens": 120,
        }

    def test_set_value_rejects_unknown_key(self, config_dir):
        """Test that unknown keys are rejected."""
        with pytest.raises(GlobalConfigError) as exc_info:
            global_config.set_value("temperature", 0.3)

        assert "Unknown config key" in str(exc_info.value)

    def test_editor_preference(self, config_dir):
        """Test reading the editor preference."""
        assert global_config.get_editor_preference() is None

        global_config.set_value("editor", "nano")

        assert global_config.get_editor_preference() == "nano"
