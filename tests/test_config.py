"""
Tests for configuration loading and validation.
"""

from pathlib import Path

import pytest

from seyren.config import SeyrenConfig, load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_file(self) -> None:
        """Test that no file and empty environment gives defaults."""
        config = load_config(env={})

        assert config.base_url == "http://localhost:8080/seyren"
        assert config.slack_webhook_url == ""
        assert config.slack_username == "Seyren"
        assert config.http_timeout == 10
        assert config.log_level == "INFO"

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
base_url: "https://seyren.example.com"
slack_webhook_url: "https://hooks.slack.com/services/AAA/BBB/CCC"
slack_username: "monitoring"
http_timeout: 5
""")

        config = load_config(config_file, env={})

        assert config.base_url == "https://seyren.example.com"
        assert config.slack_webhook_url == "https://hooks.slack.com/services/AAA/BBB/CCC"
        assert config.slack_username == "monitoring"
        assert config.http_timeout == 5

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        """Test that environment variables take precedence."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text('slack_username: "from-file"\n')

        config = load_config(config_file, env={
            "SLACK_USERNAME": "from-env",
            "SEYREN_URL": "http://seyren:8080",
            "SLACK_WEBHOOK_URL": "https://hooks.slack.com/services/ENV",
            "SEYREN_HTTP_TIMEOUT": "2.5",
        })

        assert config.slack_username == "from-env"
        assert config.base_url == "http://seyren:8080"
        assert config.slack_webhook_url == "https://hooks.slack.com/services/ENV"
        assert config.http_timeout == 2.5

    def test_empty_environment_values_ignored(self) -> None:
        """Test that blank variables do not clobber defaults."""
        config = load_config(env={"SLACK_USERNAME": ""})

        assert config.slack_username == "Seyren"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/OS")

        config = load_config()

        assert config.slack_webhook_url == "https://hooks.slack.com/services/OS"

    def test_load_missing_file(self) -> None:
        """Test that loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises an error."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(Exception):  # yaml.YAMLError
            load_config(config_file, env={})

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file is treated as no settings."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        config = load_config(config_file, env={})

        assert config.slack_username == "Seyren"

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        """Test that a YAML list is not a configuration."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(config_file, env={})

    def test_invalid_timeout(self, tmp_path: Path) -> None:
        """Test that a non-positive timeout is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("http_timeout: 0\n")

        with pytest.raises(ValueError, match="validation error"):
            load_config(config_file, env={})


class TestSeyrenConfig:
    """Tests for the SeyrenConfig model."""

    def test_config_is_immutable(self) -> None:
        """Test that shared configuration cannot be changed after loading."""
        config = SeyrenConfig()

        with pytest.raises(Exception):  # pydantic.ValidationError
            config.slack_username = "changed"  # type: ignore[misc]
